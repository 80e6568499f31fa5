import logging
import os
from pathlib import PurePath
from typing import Optional, Union

from .. import config
from ..exceptions import ErrorKind, FileReadError, TimestampError
from ..models import ImageMetadataRecord
from .timestamps import resolve_created_at

PathLike = Union[str, os.PathLike]


def file_name_of(path: PathLike) -> Optional[str]:
    """
    Final component of path, or None when there isn't a usable one
    ('/', 'a/..', or a name that is not valid Unicode).
    """
    name = PurePath(os.fspath(path)).name
    if not name or name == '..':
        return None
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return None
    return name


class FileReader:
    """
    Reads image files for the display layer.

    Returns raw bytes; text-safe encoding (base64) is the job of
    whoever carries the bytes across the process boundary.
    """

    def read_file_bytes(self, path: PathLike) -> bytes:
        path_str = os.fspath(path)
        try:
            with open(path_str, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise self._read_error(path_str, e) from e

        logging.debug(f"Read {len(data)} bytes from {path_str}")
        return data

    def get_metadata(self, path: PathLike) -> ImageMetadataRecord:
        """
        Filesystem metadata for path. The path is opened first, so a record
        is never built for something that doesn't exist.
        Width/height are left unset.
        """
        path_str = os.fspath(path)
        try:
            # os.open rather than open(): directories are valid targets on POSIX
            fd = os.open(path_str, os.O_RDONLY)
            try:
                st = os.fstat(fd)
            finally:
                os.close(fd)
        except OSError as e:
            raise self._read_error(path_str, e) from e

        try:
            created = resolve_created_at(st)
        except TimestampError as e:
            raise FileReadError(
                f"Cannot resolve creation time of {path_str}: {e}",
                ErrorKind.UNREADABLE,
                path_str,
            ) from e

        return ImageMetadataRecord(
            path=path_str,
            name=file_name_of(path_str) or config.UNKNOWN_NAME,
            size_bytes=st.st_size,
            created_at=created,
        )

    def _read_error(self, path: str, err: OSError) -> FileReadError:
        kind = ErrorKind.NOT_FOUND if isinstance(err, FileNotFoundError) else ErrorKind.UNREADABLE
        return FileReadError(f"Cannot read {path}: {err}", kind, path)
