"""
Command table exposed to the GUI front end.

Names and keyword arguments match what the front end invokes. Every
handler returns a JSON-ready value; byte content is base64-encoded here,
at the boundary. Package errors propagate unchanged so the caller can
branch on ``exc.kind``.
"""
import base64
import logging
from typing import Any, Callable, Dict, List

from .exceptions import UnknownCommandError
from .metadata.extract import FileReader
from .organization.mover import FileTransfer
from .scanning.filesystem import FolderScanner


def list_images_in_folder(folder_path: str) -> List[dict]:
    return [record.to_dict() for record in FolderScanner().list_images(folder_path)]


def list_filenames_in_folder(folder_path: str) -> List[str]:
    return FolderScanner().list_filenames(folder_path)


def list_subfolders(path: str) -> List[str]:
    return FolderScanner().list_subfolders(path)


def get_folder_tree(path: str) -> dict:
    return FolderScanner().build_folder_tree(path).to_dict()


def get_image_metadata(path: str) -> dict:
    return FileReader().get_metadata(path).to_dict()


def read_image_as_base64(path: str) -> str:
    data = FileReader().read_file_bytes(path)
    return base64.b64encode(data).decode('ascii')


def move_image(source_path: str, target_folder: str) -> str:
    # Named "move" by the front end; copies and keeps the source.
    return FileTransfer().copy_image(source_path, target_folder)


COMMANDS: Dict[str, Callable[..., Any]] = {
    "list_images_in_folder": list_images_in_folder,
    "list_filenames_in_folder": list_filenames_in_folder,
    "list_subfolders": list_subfolders,
    "get_folder_tree": get_folder_tree,
    "get_image_metadata": get_image_metadata,
    "read_image_as_base64": read_image_as_base64,
    "move_image": move_image,
}


def invoke(name: str, **kwargs) -> Any:
    handler = COMMANDS.get(name)
    if handler is None:
        raise UnknownCommandError(f"Unknown command: {name}")

    logging.debug(f"invoke {name} {kwargs}")
    return handler(**kwargs)
