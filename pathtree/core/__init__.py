"""Core path algebra and group tree."""
from .exceptions import (
    PathTreeException,
    InvalidPathError,
    GroupFullPathMustStartWithSlashError,
    GroupStoreError,
)
