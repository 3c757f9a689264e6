"""
Group record stores.

Records are the flat form of GroupNode.to_dict(), keyed by handle.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, Union

from ..exceptions import GroupStoreError
from ..logging import get_logger
from .models import GroupNode
from .protocols import GroupStore

logger = get_logger(__name__)


class MemoryGroupStore(GroupStore):
    """
    In-memory group store.

    Records are lost when the object is destroyed. Useful for tests and
    trees that only need persistence within one process.
    """

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}

    def load(self) -> Dict[str, Dict[str, Any]]:
        return {handle: dict(record) for handle, record in self._records.items()}

    def save(self, node: GroupNode) -> None:
        self._records[node.handle] = node.to_dict()

    def save_many(self, nodes: Iterable[GroupNode]) -> None:
        for node in nodes:
            self.save(node)

    def exists(self) -> bool:
        return bool(self._records)

    def delete(self) -> None:
        self._records.clear()


class JsonGroupStore(GroupStore):
    """
    JSON file group store.

    The file is replaced atomically on every write, so an interrupted
    write leaves the previous contents in place.

    Example:
        >>> store = JsonGroupStore("groups.json")
        >>> store.save(node)
        >>> records = store.load()
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize JSON store.

        Args:
            path: Path of the JSON file (created on first save)
        """
        self.path = Path(path)

    def load(self) -> Dict[str, Dict[str, Any]]:
        """
        Load records from the JSON file.

        Returns:
            Records keyed by handle (empty if the file does not exist)

        Raises:
            GroupStoreError: If the file is not a JSON object of records
        """
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise GroupStoreError(f"Invalid group store: {e}", str(self.path)) from e

        if not isinstance(data, dict):
            raise GroupStoreError("Group store must contain a JSON object", str(self.path))
        return data

    def save(self, node: GroupNode) -> None:
        self.save_many([node])

    def save_many(self, nodes: Iterable[GroupNode]) -> None:
        """
        Insert or update several records with a single file write.

        Args:
            nodes: Nodes to store, in the order they should appear
        """
        records = self.load()
        saved = []
        for node in nodes:
            records[node.handle] = node.to_dict()
            saved.append(node.full_path)
        if not saved:
            return
        self._write(records)
        logger.info(f"Saved groups {', '.join(saved)} to {self.path}")

    def _write(self, records: Dict[str, Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent),
            prefix=f".{self.path.name}.",
            suffix='.tmp'
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def exists(self) -> bool:
        return self.path.exists()

    def delete(self) -> None:
        if self.path.exists():
            self.path.unlink()
