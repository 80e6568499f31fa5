"""
Custom exception hierarchy for the image browser backend.

Every failure that reaches a caller carries an ErrorKind so the front end
can branch on it, plus a human-readable message that includes the
underlying OS error text.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_A_DIRECTORY = "NotADirectory"
    DIRECTORY_UNREADABLE = "DirectoryUnreadable"
    ENTRY_UNREADABLE = "EntryUnreadable"
    NOT_FOUND = "NotFound"
    UNREADABLE = "Unreadable"
    SOURCE_NOT_FOUND = "SourceNotFound"
    TARGET_NOT_FOUND = "TargetNotFound"
    INVALID_SOURCE_PATH = "InvalidSourcePath"
    TARGET_ALREADY_EXISTS = "TargetAlreadyExists"
    COPY_IO_ERROR = "CopyIOError"
    INVALID_PENDING_FILE = "InvalidPendingFile"


class ImageBrowserError(Exception):
    """Base exception for all image browser errors."""

    def __init__(self, message: str, kind: Optional[ErrorKind] = None, path: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.path = path

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value if self.kind else None,
            "message": str(self),
        }


class ScanError(ImageBrowserError):
    """Raised when a folder cannot be enumerated."""
    pass


class FileReadError(ImageBrowserError):
    """Raised when a file or its metadata cannot be read."""
    pass


class FileOperationError(ImageBrowserError):
    """Raised when a copy request is rejected or fails."""
    pass


class TimestampError(ImageBrowserError):
    """Raised when no usable clock value exists for an entry."""
    pass


class PendingFileError(ImageBrowserError):
    """Raised when a batch file of pending transfers cannot be loaded."""
    pass


class UnknownCommandError(ImageBrowserError):
    """Raised when the command table has no handler for a name."""
    pass
