"""Path algebra and relative locations."""
from .algebra import (
    ROOT,
    SEPARATOR,
    Path,
    split_components,
    join_components,
    last_component,
    parent_path,
    extension,
    removing_extension,
    standardize,
    make_absolute,
    append_component,
    append_extension,
)
from .relative import Location, relative_path, resolve

__all__ = [
    'ROOT',
    'SEPARATOR',
    'Path',
    'split_components',
    'join_components',
    'last_component',
    'parent_path',
    'extension',
    'removing_extension',
    'standardize',
    'make_absolute',
    'append_component',
    'append_extension',
    'Location',
    'relative_path',
    'resolve',
]
