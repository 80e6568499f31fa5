from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class DirectoryEntryRecord:
    """
    Represents one image file found during a folder scan.
    """
    name: str               # bare file name, no separators
    path: str               # platform-native full path
    size_bytes: int
    created_at: str         # RFC 3339 timestamp with offset

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "size": self.size_bytes,
            "created": self.created_at,
        }


@dataclass(frozen=True)
class ImageMetadataRecord:
    """
    Filesystem-level metadata for a single image.
    Width/height are filled in by a collaborator that decodes image headers.
    """
    path: str
    name: str
    size_bytes: int
    created_at: str
    width: Optional[int] = None
    height: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size_bytes,
            "created": self.created_at,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class FolderNode:
    name: str
    path: str
    subfolders: List["FolderNode"] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "subfolders": [sub.to_dict() for sub in self.subfolders],
        }


@dataclass(frozen=True)
class PendingTransfer:
    """A queued copy request (the front end calls these 'pending moves')."""
    image_path: str
    target_folder: str
    image_name: str


@dataclass(frozen=True)
class TransferOutcome:
    pending: PendingTransfer
    success: bool
    message: str


@dataclass
class TransferSummary:
    outcomes: List[TransferOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)

    @property
    def failed_messages(self) -> List[str]:
        return [o.message for o in self.outcomes if not o.success]

    def to_dict(self) -> dict:
        return {
            "succeeded": self.succeeded,
            "failed": self.failed,
            "failedFiles": self.failed_messages,
        }
