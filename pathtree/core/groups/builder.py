"""Tree builder for stored group records."""
from typing import Any, Dict, List, Optional

from ..exceptions import GroupStoreError
from .models import GroupNode


class GroupTreeBuilder:
    """Builds a group tree from a flat dictionary of records."""

    def build(self, records: Dict[str, Dict[str, Any]]) -> Optional[GroupNode]:
        """
        Builds tree structure from flat records.

        Every record must reach the single main group through stored
        parent records.

        Returns:
            The main group (root), or None for an empty record set

        Raises:
            GroupStoreError: If a record is missing fields, references a
                parent that is not stored, or there is not exactly one
                main group
        """
        if not records:
            return None

        nodes: Dict[str, GroupNode] = {}
        for handle, data in records.items():
            try:
                nodes[handle] = GroupNode.from_dict({**data, 'handle': handle})
            except KeyError as e:
                raise GroupStoreError(f"Group record {handle} is missing {e}") from e

        roots: List[GroupNode] = []
        for node in nodes.values():
            if node.parent_handle is None:
                if not node.is_main_group:
                    raise GroupStoreError(
                        f"Group record {node.handle} ({node.full_path}) has no parent"
                    )
                roots.append(node)
                continue

            parent = nodes.get(node.parent_handle)
            if parent is None:
                raise GroupStoreError(
                    f"Group record {node.handle} ({node.full_path}) references "
                    f"missing parent {node.parent_handle}"
                )
            parent.add_child(node)

        if len(roots) != 1:
            paths = ', '.join(root.full_path for root in roots) or 'none'
            raise GroupStoreError(f"Expected one main group, found {len(roots)}: {paths}")
        return roots[0]
