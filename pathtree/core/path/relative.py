"""
Relative references between hierarchical locations.

A location is a URL-like value: an identity (scheme, host, port) and a
path. Two locations with the same identity can be expressed relative to
each other; the base location is treated as a directory.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union
from urllib.parse import urlsplit

from .algebra import PARENT, ROOT, SEPARATOR, split_components, standardize


@dataclass(frozen=True)
class Location:
    """
    Hierarchical location.

    Attributes:
        path: Path part
        scheme: Scheme (empty for plain paths)
        host: Host name
        port: Port number
        query: Query string without the leading "?"
    """
    path: str
    scheme: str = ''
    host: str = ''
    port: Optional[int] = None
    query: Optional[str] = None

    @property
    def identity(self) -> Tuple[str, str, Optional[int]]:
        return (self.scheme, self.host, self.port)

    @property
    def components(self) -> Tuple[str, ...]:
        """Standardized path components without a trailing "/" marker."""
        comps = split_components(standardize(self.path)).components
        if len(comps) > 1 and comps[-1] == ROOT:
            comps = comps[:-1]
        return comps

    def standardized(self) -> 'Location':
        return Location(
            path=standardize(self.path),
            scheme=self.scheme,
            host=self.host,
            port=self.port,
            query=self.query
        )

    @classmethod
    def parse(cls, value: str) -> 'Location':
        """Parse a URL or plain path string."""
        parts = urlsplit(value)
        try:
            port = parts.port
        except ValueError:
            port = None
        return cls(
            path=parts.path,
            scheme=parts.scheme,
            host=parts.hostname or '',
            port=port,
            query=parts.query or None
        )

    def __str__(self) -> str:
        result = ''
        if self.scheme:
            result += f"{self.scheme}:"
        if self.host or self.scheme in ('file', 'http', 'https'):
            result += f"//{self.host}"
            if self.port is not None:
                result += f":{self.port}"
        result += self.path
        if self.query is not None:
            result += f"?{self.query}"
        return result


LocationLike = Union[Location, str]


def _as_location(value: LocationLike) -> Location:
    if isinstance(value, Location):
        return value
    return Location.parse(value)


def relative_path(target: LocationLike, base: LocationLike) -> Location:
    """
    Express target relative to base.

    Locations with different identities cannot be related; target is
    returned unchanged in that case.

    Args:
        target: Location to reach
        base: Location to start from (treated as a directory)

    Returns:
        Relative location with empty scheme, host and port
    """
    target = _as_location(target)
    base = _as_location(base)
    if target.identity != base.identity:
        return target

    dest_comps = target.standardized().components
    base_comps = base.standardized().components

    i = 0
    while i < len(dest_comps) and i < len(base_comps) and dest_comps[i] == base_comps[i]:
        i += 1

    rel_comps = [PARENT] * (len(base_comps) - i)
    rel_comps.extend(dest_comps[i:])
    return Location(path=SEPARATOR.join(rel_comps), query=target.query)


def resolve(relative: LocationLike, base: LocationLike) -> Location:
    """Apply a relative location onto a base location."""
    relative = _as_location(relative)
    base = _as_location(base)
    if relative.scheme or relative.host:
        return relative

    if relative.path.startswith(SEPARATOR):
        path = standardize(relative.path)
    elif relative.path and base.path:
        path = standardize(base.path.rstrip(SEPARATOR) + SEPARATOR + relative.path)
    elif relative.path:
        path = standardize(relative.path)
    else:
        path = standardize(base.path)
    return Location(
        path=path,
        scheme=base.scheme,
        host=base.host,
        port=base.port,
        query=relative.query
    )
