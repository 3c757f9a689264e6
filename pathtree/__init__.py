"""
pathtree - POSIX path algebra, relative locations and group trees.

Usage:
    >>> from pathtree import GroupTree, relative_path
    >>> 
    >>> tree = GroupTree.create("/Project")
    >>> core = tree.create_sub_group("/Project/Sources/Core", create_folders=False)
    >>> tree.relative_path(core)
    'Sources/Core'
    >>> str(relative_path("/a/x", "/a/b/c"))
    '../../x'
"""
from .core.path import (
    Path,
    Location,
    split_components,
    join_components,
    last_component,
    parent_path,
    extension,
    removing_extension,
    standardize,
    make_absolute,
    relative_path,
    resolve,
)
from .core.groups import (
    GroupNode,
    GroupTree,
    GroupGetOptions,
    GroupFactory,
    GroupStore,
    MemoryGroupFactory,
    ProjectGroupFactory,
    MemoryGroupStore,
    JsonGroupStore,
)
from .core.config import TreeConfig
from .core.logging import setup_logging
from .core.exceptions import (
    PathTreeException,
    InvalidPathError,
    GroupFullPathMustStartWithSlashError,
    GroupStoreError,
)

__version__ = '1.0.0'

__all__ = [
    'Path',
    'Location',
    'split_components',
    'join_components',
    'last_component',
    'parent_path',
    'extension',
    'removing_extension',
    'standardize',
    'make_absolute',
    'relative_path',
    'resolve',
    'GroupNode',
    'GroupTree',
    'GroupGetOptions',
    'GroupFactory',
    'GroupStore',
    'MemoryGroupFactory',
    'ProjectGroupFactory',
    'MemoryGroupStore',
    'JsonGroupStore',
    'TreeConfig',
    'PathTreeException',
    'InvalidPathError',
    'GroupFullPathMustStartWithSlashError',
    'GroupStoreError',
    'setup_logging',
]
