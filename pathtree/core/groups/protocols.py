"""
Group tree collaborator protocols.

The tree walk only decides which children are missing; creating them
(and any side effects on disk or in a store) is left to a factory.
"""
from typing import Any, Dict, Iterable, Optional, Protocol, runtime_checkable

from .models import GroupNode


@runtime_checkable
class GroupFactory(Protocol):
    """Creates and finds child groups."""

    def create_child(
        self,
        parent: GroupNode,
        name: str,
        create_folder: bool,
        persist: bool
    ) -> GroupNode:
        """
        Create a child group under parent.

        Args:
            parent: Parent group
            name: Name of the new group
            create_folder: Whether a real folder should be created
            persist: Whether the new group should be saved

        Returns:
            The attached child group
        """
        ...

    def find_child(self, parent: GroupNode, name: str) -> Optional[GroupNode]:
        """
        Find a child group by exact name.

        Returns:
            The child, or None if parent has no such child
        """
        ...


@runtime_checkable
class GroupStore(Protocol):
    """Storage for flat group records keyed by handle."""

    def load(self) -> Dict[str, Dict[str, Any]]:
        """Load all records."""
        ...

    def save(self, node: GroupNode) -> None:
        """Insert or update the record of a node."""
        ...

    def save_many(self, nodes: Iterable[GroupNode]) -> None:
        """Insert or update the records of several nodes, in order."""
        ...

    def exists(self) -> bool:
        ...

    def delete(self) -> None:
        ...
