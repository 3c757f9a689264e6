"""Group factories used by the tree to create missing children."""
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..logging import get_logger
from ..path import make_absolute
from .models import GroupNode
from .protocols import GroupFactory, GroupStore

logger = get_logger(__name__)


class MemoryGroupFactory(GroupFactory):
    """Creates groups in memory only; folder and persist flags are ignored."""

    def find_child(self, parent: GroupNode, name: str) -> Optional[GroupNode]:
        return parent.find_child(name)

    def create_child(
        self,
        parent: GroupNode,
        name: str,
        create_folder: bool = False,
        persist: bool = False
    ) -> GroupNode:
        child = parent.add_child(parent.make_child(name))
        logger.debug(f"Created group {child.full_path}")
        return child


class ProjectGroupFactory(MemoryGroupFactory):
    """
    Group factory backed by a folder tree and a record store.

    The group path "/" maps to base_dir, so group "/Project/Sources" lives
    in "<base_dir>/Project/Sources".
    """

    def __init__(
        self,
        base_dir: Optional[Union[str, Path]] = None,
        store: Optional[GroupStore] = None
    ):
        """
        Initialize project factory.

        Args:
            base_dir: Directory that group folders are created under
            store: Store that persisted groups are saved to
        """
        self.base_dir = str(base_dir) if base_dir is not None else None
        self.store = store
        # Nodes seen while the tree walks, used to find a new group's ancestors
        self._known: Dict[str, GroupNode] = {}

    def folder_for(self, node: GroupNode) -> Optional[str]:
        """Filesystem folder of a group, or None without a base directory."""
        if self.base_dir is None:
            return None
        return make_absolute(node.full_path.lstrip('/'), self.base_dir)

    def lineage(self, node: GroupNode) -> List[GroupNode]:
        """Known ancestors of node from the main group down, then node itself."""
        chain = [node]
        current = node
        while current.parent_handle is not None:
            current = self._known.get(current.parent_handle)
            if current is None:
                break
            chain.append(current)
        chain.reverse()
        return chain

    def find_child(self, parent: GroupNode, name: str) -> Optional[GroupNode]:
        self._known[parent.handle] = parent
        child = super().find_child(parent, name)
        if child is not None:
            self._known[child.handle] = child
        return child

    def create_child(
        self,
        parent: GroupNode,
        name: str,
        create_folder: bool = True,
        persist: bool = True
    ) -> GroupNode:
        self._known[parent.handle] = parent
        child = super().create_child(parent, name, create_folder, persist)
        self._known[child.handle] = child

        folder = self.folder_for(child) if create_folder else None
        if folder is not None:
            Path(folder).mkdir(parents=True, exist_ok=True)
            logger.info(f"Created folder {folder}")

        if persist and self.store is not None:
            # Ancestors created with persist=False must be stored before the child
            self.store.save_many(self.lineage(child))

        return child
