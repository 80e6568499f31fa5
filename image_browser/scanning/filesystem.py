import os
import logging
from typing import List, Union

from ..exceptions import ErrorKind, ScanError, TimestampError
from ..metadata.timestamps import resolve_created_at
from ..models import DirectoryEntryRecord, FolderNode
from .classify import is_supported_image

PathLike = Union[str, os.PathLike]


class FolderScanner:
    """
    Single-level folder enumeration for the gallery.

    Every call is all-or-nothing: the first unreadable entry aborts the
    scan and nothing collected so far is returned.
    """

    def list_images(self, folder_path: PathLike) -> List[DirectoryEntryRecord]:
        """Regular files in folder_path with a supported image extension, in enumeration order."""
        records = []
        for entry in self._regular_files(folder_path):
            if not is_supported_image(entry.name):
                continue
            try:
                st = entry.stat(follow_symlinks=False)
                created = resolve_created_at(st)
            except (OSError, TimestampError) as e:
                raise ScanError(
                    f"Cannot read metadata for {entry.path}: {e}",
                    ErrorKind.ENTRY_UNREADABLE,
                    entry.path,
                ) from e

            records.append(DirectoryEntryRecord(
                name=entry.name,
                path=entry.path,
                size_bytes=st.st_size,
                created_at=created,
            ))

        logging.debug(f"Found {len(records)} images in {os.fspath(folder_path)}")
        return records

    def list_filenames(self, folder_path: PathLike) -> List[str]:
        """Bare names of every regular file in folder_path; no classification."""
        return [entry.name for entry in self._regular_files(folder_path)]

    def list_subfolders(self, folder_path: PathLike) -> List[str]:
        """Names of the direct child directories of folder_path (symlinks excluded)."""
        names = []
        for entry in self._entries(folder_path):
            if self._check_type(entry, directory=True):
                names.append(entry.name)
        return names

    def build_folder_tree(self, folder_path: PathLike) -> FolderNode:
        """
        Recursively expands folder_path into a FolderNode tree using
        list_subfolders at each level. Children keep enumeration order.
        """
        root = os.fspath(folder_path)
        name = os.path.basename(os.path.normpath(root)) or root
        node = FolderNode(name=name, path=root)
        for sub in self.list_subfolders(root):
            node.subfolders.append(self.build_folder_tree(os.path.join(root, sub)))
        return node

    # --- Internals ---

    def _regular_files(self, folder_path: PathLike) -> List[os.DirEntry]:
        return [e for e in self._entries(folder_path) if self._check_type(e, directory=False)]

    def _entries(self, folder_path: PathLike) -> List[os.DirEntry]:
        """Validates folder_path and reads all of its direct entries."""
        path = os.fspath(folder_path)
        if not os.path.isdir(path):
            raise ScanError(
                f"Provided path is not a directory: {path}",
                ErrorKind.NOT_A_DIRECTORY,
                path,
            )

        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            raise ScanError(
                f"Cannot read directory {path}: {e}",
                ErrorKind.DIRECTORY_UNREADABLE,
                path,
            ) from e

        return [e for e in entries if self._has_valid_name(e)]

    def _check_type(self, entry: os.DirEntry, directory: bool) -> bool:
        try:
            if directory:
                return entry.is_dir(follow_symlinks=False)
            return entry.is_file(follow_symlinks=False)
        except OSError as e:
            raise ScanError(
                f"Cannot read file type of {entry.path}: {e}",
                ErrorKind.ENTRY_UNREADABLE,
                entry.path,
            ) from e

    def _has_valid_name(self, entry: os.DirEntry) -> bool:
        # Undecodable names come back with surrogate escapes; the front end can't address them.
        try:
            entry.name.encode('utf-8')
        except UnicodeEncodeError:
            logging.debug(f"Skipping entry with undecodable name in {os.path.dirname(entry.path)!r}")
            return False
        return True
