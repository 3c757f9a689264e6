"""Group node model."""
from typing import Any, Dict, Iterator, List, Optional

from ..path import Path, split_components
from ..utils import generate_handle


class GroupNode:
    """
    Named node of a group tree.

    Children are owned by their parent and keyed by name. The tree root is
    referenced by handle (main_group), never by object.
    """

    def __init__(
        self,
        name: str,
        full_path: str,
        handle: Optional[str] = None,
        parent_handle: Optional[str] = None,
        main_group: Optional[str] = None
    ):
        """Initializes group node."""
        self.name = name
        self.full_path = full_path
        self.handle = handle or generate_handle()
        self.parent_handle = parent_handle
        # A root is its own main group
        self.main_group = main_group or self.handle
        self._children: Dict[str, 'GroupNode'] = {}

    @property
    def path(self) -> Path:
        """Full path as a parsed Path."""
        return split_components(self.full_path)

    @property
    def is_main_group(self) -> bool:
        return self.main_group == self.handle

    @property
    def children(self) -> Dict[str, 'GroupNode']:
        """Read-only copy of the children mapping."""
        return dict(self._children)

    def get_children(self) -> List['GroupNode']:
        return list(self._children.values())

    def find_child(self, name: str) -> Optional['GroupNode']:
        """Finds child by exact name."""
        return self._children.get(name)

    def child_path(self, name: str) -> str:
        """Full path a child with the given name would have."""
        if self.full_path.endswith('/'):
            return self.full_path + name
        return f"{self.full_path}/{name}"

    def make_child(self, name: str, handle: Optional[str] = None) -> 'GroupNode':
        """Creates (but does not attach) a child node."""
        return GroupNode(
            name=name,
            full_path=self.child_path(name),
            handle=handle,
            parent_handle=self.handle,
            main_group=self.main_group
        )

    def add_child(self, child: 'GroupNode') -> 'GroupNode':
        """
        Attaches a child node.

        Children are never replaced: if a child with the same name exists,
        that child is returned and the new one is discarded.
        """
        existing = self._children.get(child.name)
        if existing is not None:
            return existing
        child.parent_handle = self.handle
        self._children[child.name] = child
        return child

    def relative_to(self, root: 'GroupNode') -> str:
        """
        Path of this node relative to the given root.

        The root's full path is removed as a literal string prefix, then
        one leading slash.
        """
        path = self.full_path
        root_path = root.full_path
        if path.startswith(root_path):
            path = path[len(root_path):]
        if path.startswith('/'):
            path = path[1:]
        return path

    def walk(self) -> Iterator['GroupNode']:
        """Pre-order iteration over this node and its descendants."""
        yield self
        for child in self._children.values():
            yield from child.walk()

    def to_dict(self) -> Dict[str, Any]:
        """Converts node to a flat record."""
        return {
            'handle': self.handle,
            'parent': self.parent_handle,
            'main_group': self.main_group,
            'name': self.name,
            'full_path': self.full_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GroupNode':
        return cls(
            name=data['name'],
            full_path=data['full_path'],
            handle=data['handle'],
            parent_handle=data.get('parent'),
            main_group=data.get('main_group')
        )

    def __iter__(self) -> Iterator['GroupNode']:
        return iter(self.get_children())

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"GroupNode(name={self.name!r}, full_path={self.full_path!r})"
