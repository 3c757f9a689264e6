"""
Group tree.

Resolves groups by absolute path and creates missing groups on the way.
The tree only ever grows: children are appended, never removed or renamed.
"""
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from ..exceptions import (
    GroupFullPathMustStartWithSlashError,
    GroupStoreError,
    InvalidPathError,
)
from ..logging import get_logger
from ..path import ROOT, last_component, split_components, standardize
from .builder import GroupTreeBuilder
from .factory import MemoryGroupFactory
from .models import GroupNode
from .protocols import GroupFactory, GroupStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class GroupGetOptions:
    """
    Options for GroupTree.sub_group().

    Attributes:
        create: Create the group (and missing parents) if it does not exist
        create_folders: Ask the factory to create real folders
        persist: Ask the factory to persist new groups
    """
    create: bool = False
    create_folders: bool = False
    persist: bool = False


GroupGetOptions.GET = GroupGetOptions()
GroupGetOptions.CREATE_ONLY = GroupGetOptions(create=True)
GroupGetOptions.CREATE_AND_SAVE = GroupGetOptions(create=True, create_folders=True, persist=True)


def _group_names(path: str) -> List[str]:
    """Names along a group path, without root markers or empty parts."""
    return [c for c in split_components(path) if c and c != ROOT]


class GroupTree:
    """
    In-memory tree of named groups.

    Example:
        >>> tree = GroupTree.create("/Project")
        >>> core = tree.resolve_or_create("/Project/Sources/Core")
        >>> tree.lookup("/Project/Sources/Core") is core
        True
    """

    def __init__(self, root: GroupNode, factory: Optional[GroupFactory] = None):
        """
        Initialize tree.

        Args:
            root: Main group of the tree
            factory: Collaborator creating missing children
        """
        self.root = root
        self.factory: GroupFactory = factory or MemoryGroupFactory()
        self._lock = threading.RLock()
        self._nodes: Dict[str, GroupNode] = {node.handle: node for node in root.walk()}
        self._root_names = _group_names(root.full_path)

    @classmethod
    def create(cls, root_path: str = ROOT, factory: Optional[GroupFactory] = None) -> 'GroupTree':
        """Create a tree with a fresh root at root_path."""
        if not root_path.startswith('/'):
            raise InvalidPathError(root_path)
        root = GroupNode(name=last_component(root_path), full_path=root_path)
        return cls(root, factory)

    @classmethod
    def load(
        cls,
        store: GroupStore,
        factory: Optional[GroupFactory] = None,
        root_path: Optional[str] = None
    ) -> 'GroupTree':
        """
        Rebuild a tree from a store.

        Args:
            store: Store holding the group records
            factory: Collaborator creating missing children
            root_path: Expected main group path; None accepts any stored
                root. An empty store gives a new tree rooted here (or at /).

        Raises:
            GroupStoreError: If the records do not form one tree, or the
                stored main group is not at root_path
        """
        root = GroupTreeBuilder().build(store.load())
        if root is None:
            return cls.create(root_path or ROOT, factory)
        if root_path is not None and standardize(root.full_path) != standardize(root_path):
            logger.warning(f"Stored main group {root.full_path} does not match {root_path}")
            raise GroupStoreError(
                f"Stored main group is {root.full_path}, not {root_path}"
            )
        return cls(root, factory)

    def _names(self, path: str) -> List[str]:
        if not path.startswith('/'):
            logger.warning(f"Rejected group path {path!r}")
            raise InvalidPathError(path)
        names = _group_names(path)
        if self._root_names and names[:len(self._root_names)] == self._root_names:
            names = names[len(self._root_names):]
        return names

    def lookup(self, path: str) -> Optional[GroupNode]:
        """
        Find a group by absolute path.

        Returns:
            The group, or None if any step of the path is missing

        Raises:
            InvalidPathError: If path does not start with a slash
        """
        current = self.root
        for name in self._names(path):
            current = self.factory.find_child(current, name)
            if current is None:
                return None
        return current

    def resolve_or_create(
        self,
        path: str,
        create_folders: bool = True,
        persist: bool = True
    ) -> GroupNode:
        """
        Find a group by absolute path, creating every missing group on the way.

        Args:
            path: Absolute group path
            create_folders: Passed to the factory for each new group
            persist: Passed to the factory for each new group

        Returns:
            The existing or newly created group

        Raises:
            InvalidPathError: If path does not start with a slash
        """
        names = self._names(path)
        with self._lock:
            current = self.root
            for name in names:
                child = self.factory.find_child(current, name)
                if child is None:
                    child = self.factory.create_child(current, name, create_folders, persist)
                    self._nodes[child.handle] = child
                current = child
            return current

    def create_sub_group(
        self,
        path: str,
        create_folders: bool = True,
        persist: bool = True
    ) -> GroupNode:
        """
        Create a sub group somewhere under the main group.

        Raises:
            GroupFullPathMustStartWithSlashError: Before any change, if path
                does not start with a slash
        """
        if not path.startswith('/'):
            raise GroupFullPathMustStartWithSlashError(path)
        return self.resolve_or_create(path, create_folders, persist)

    def sub_group(
        self,
        path: str,
        options: GroupGetOptions = GroupGetOptions.GET
    ) -> Optional[GroupNode]:
        """Get a sub group, creating it if options allow."""
        group = self.lookup(path)
        if group is not None or not options.create:
            return group
        return self.create_sub_group(path, options.create_folders, options.persist)

    def relative_path(self, node: GroupNode) -> str:
        """Path of node relative to its main group."""
        main_group = self._nodes.get(node.main_group, self.root)
        return node.relative_to(main_group)

    def get(self, handle: str) -> Optional[GroupNode]:
        return self._nodes.get(handle)

    def iter_nodes(self) -> Iterator[GroupNode]:
        return self.root.walk()

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())
