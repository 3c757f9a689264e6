"""
Tree configuration module.

Collects the options used to build a group tree and its collaborators.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from .groups import GroupTree, JsonGroupStore, ProjectGroupFactory
from .logging import setup_logging


@dataclass
class TreeConfig:
    """
    Group tree configuration.
    
    Attributes:
        root_path: Full path of the main group. None accepts whatever main
            group the store holds, and starts new trees at "/"
        base_dir: Directory that group folders are created under
        store_path: JSON file that groups are persisted to
        create_folders: Create folders for new groups
        persist: Persist new groups
        log_level: Level applied with setup_logging() when a tree is built
    """
    root_path: Optional[str] = None
    base_dir: Optional[str] = None
    store_path: Optional[str] = None
    create_folders: bool = True
    persist: bool = True
    log_level: int = logging.INFO
    
    @classmethod
    def default(cls) -> 'TreeConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def in_memory(cls, **kwargs) -> 'TreeConfig':
        """Create configuration that never touches disk."""
        return cls(create_folders=False, persist=False, **kwargs)
    
    def creation_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for GroupTree.create_sub_group()."""
        return {
            'create_folders': self.create_folders,
            'persist': self.persist,
        }
    
    def build_tree(self) -> GroupTree:
        """
        Build a tree, loading previously persisted groups if any.
        
        Raises:
            GroupStoreError: If the store cannot be loaded or its main group
                is not at root_path
        """
        setup_logging(self.log_level)
        store = JsonGroupStore(self.store_path) if self.store_path else None
        factory = ProjectGroupFactory(base_dir=self.base_dir, store=store)
        if store is not None:
            return GroupTree.load(store, factory, root_path=self.root_path)
        return GroupTree.create(self.root_path or '/', factory)
