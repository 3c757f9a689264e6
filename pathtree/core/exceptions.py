"""
Custom exceptions for pathtree operations.

Path algebra functions never raise; these cover the group tree and
its stores.
"""
from typing import Optional


class PathTreeException(Exception):
    """Base exception for all pathtree errors."""
    
    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class InvalidPathError(PathTreeException):
    """Raised when a group path does not start with a slash."""
    
    def __init__(self, path: str, message: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message or f"Invalid group path '{path}'")


class GroupFullPathMustStartWithSlashError(InvalidPathError):
    """Raised by sub group creation for a path without a leading slash."""
    
    def __init__(self, path: str) -> None:
        super().__init__(path, f"Group Path '{path}' must start with a slash(/)")


class GroupStoreError(PathTreeException):
    """Raised when stored group records cannot be loaded."""
    
    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            location: Store location (file path) if any
            error_code: Numeric error code (if available)
        """
        self.location = location
        super().__init__(message, error_code)
