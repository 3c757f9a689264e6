"""Group tree: named nodes resolved and created by path."""
from .models import GroupNode
from .protocols import GroupFactory, GroupStore
from .factory import MemoryGroupFactory, ProjectGroupFactory
from .store import MemoryGroupStore, JsonGroupStore
from .builder import GroupTreeBuilder
from .tree import GroupTree, GroupGetOptions

__all__ = [
    'GroupNode',
    'GroupFactory',
    'GroupStore',
    'MemoryGroupFactory',
    'ProjectGroupFactory',
    'MemoryGroupStore',
    'JsonGroupStore',
    'GroupTreeBuilder',
    'GroupTree',
    'GroupGetOptions',
]
