"""
Path algebra over POSIX-style path strings.

Paths are split into components where a leading or trailing separator
is kept as the root marker "/". None of these functions raise; empty or
odd input gives an empty result.
"""
import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

SEPARATOR = '/'
ROOT = '/'
PARENT = '..'
CURRENT = '.'


@dataclass(frozen=True)
class Path:
    """
    Parsed path value.

    Attributes:
        components: Path components, including root markers
        is_absolute: Path began with a separator
        is_directory_like: Path ended with a separator
    """
    components: Tuple[str, ...] = ()
    is_absolute: bool = False
    is_directory_like: bool = False

    def __iter__(self) -> Iterator[str]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index):
        return self.components[index]

    def __str__(self) -> str:
        if self.components == (ROOT,):
            return ROOT
        comps = list(self.components)
        prefix = suffix = ''
        if self.is_absolute and comps and comps[0] == ROOT:
            comps.pop(0)
            prefix = SEPARATOR
        if self.is_directory_like and comps and comps[-1] == ROOT:
            comps.pop()
            suffix = SEPARATOR
        return prefix + SEPARATOR.join(comps) + suffix

    @property
    def is_root(self) -> bool:
        return self.components == (ROOT,)

    @classmethod
    def parse(cls, path: str) -> 'Path':
        """Alias for split_components()."""
        return split_components(path)


def split_components(path: str) -> Path:
    """
    Split a path string into components.

    "/" gives the single component "/". A leading separator replaces the
    first (empty) component with "/", a trailing separator replaces the
    last one; both rules apply independently.
    """
    if not path:
        return Path()
    if path == ROOT:
        return Path((ROOT,), is_absolute=True, is_directory_like=True)

    comps = path.split(SEPARATOR)
    is_absolute = path.startswith(SEPARATOR)
    is_directory_like = path.endswith(SEPARATOR)
    if is_absolute and comps[0] == '':
        comps[0] = ROOT
    if is_directory_like and comps[-1] == '':
        comps[-1] = ROOT
    return Path(tuple(comps), is_absolute, is_directory_like)


def join_components(components: Iterable[str]) -> str:
    """
    Join components back into a path string.

    A leading "/" marker followed by more components contributes an empty
    prefix so the separator is not doubled.
    """
    comps = list(components)
    if not comps:
        return ''
    result = comps.pop(0)
    if comps and result == ROOT:
        result = ''
    for comp in comps:
        result += SEPARATOR + comp
    return result


def last_component(path: str) -> str:
    """Last meaningful component; a trailing "/" marker is skipped."""
    comps = split_components(path).components
    if not comps:
        return ''
    last = comps[-1]
    if last == ROOT and len(comps) > 1:
        last = comps[-2]
    return last


def parent_path(path: str) -> str:
    """Path with its last component removed."""
    comps = list(split_components(path).components)
    if comps == [ROOT]:
        return ROOT
    if len(comps) < 2:
        return ''
    comps.pop()
    return join_components(comps)


def _file_components(path: str) -> list:
    comps = list(split_components(path).components)
    if len(comps) > 1 and comps[-1] == ROOT:
        comps.pop()
    return comps


def extension(path: str) -> str:
    """Text after the last "." of the last file-like component."""
    comps = _file_components(path)
    if not comps:
        return ''
    name = comps[-1]
    idx = name.rfind('.')
    if idx < 0:
        return ''
    return name[idx + 1:]


def removing_extension(path: str) -> str:
    """Path with the extension of its last file-like component removed."""
    comps = _file_components(path)
    if not comps:
        return ''
    idx = comps[-1].rfind('.')
    if idx >= 0:
        comps[-1] = comps[-1][:idx]
    return join_components(comps)


def standardize(path: str) -> str:
    """
    Collapse "." and ".." segments and redundant separators.

    A trailing separator is dropped (except for "/"). ".." above the root
    of an absolute path is discarded; leading ".." of a relative path is
    kept.
    """
    if not path:
        return ''
    is_absolute = path.startswith(SEPARATOR)
    parts = []
    for part in path.split(SEPARATOR):
        if part in ('', CURRENT):
            continue
        if part == PARENT:
            if parts and parts[-1] != PARENT:
                parts.pop()
            elif not is_absolute:
                parts.append(part)
            continue
        parts.append(part)

    if is_absolute:
        return SEPARATOR + SEPARATOR.join(parts)
    if not parts:
        return CURRENT
    return SEPARATOR.join(parts)


def make_absolute(path: str, base: Optional[str] = None) -> str:
    """
    Expand a path against a base directory.

    Args:
        path: Absolute, home-relative ("~/") or relative path
        base: Base directory (defaults to the current working directory)

    Returns:
        Standardized absolute path; absolute input is returned unchanged
    """
    if path.startswith(SEPARATOR):
        return path
    if path.startswith('~/'):
        return standardize(os.path.expanduser(path))

    result = base if base is not None else os.getcwd()
    if not result.endswith(SEPARATOR):
        result += SEPARATOR
    result += path
    return standardize(result)


def append_component(path: str, component: str) -> str:
    """Append a component, dropping one leading separator from it."""
    if not component:
        return path
    if component.startswith(SEPARATOR):
        component = component[1:]
    return path + SEPARATOR + component


def append_extension(path: str, ext: str) -> str:
    return f"{path}.{ext}"
