import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import commands, config
from .exceptions import ErrorKind, ImageBrowserError, PendingFileError
from .metadata.extract import file_name_of
from .models import PendingTransfer
from .organization.mover import FileTransfer
from .reporting import TransferReport


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Logs to stderr (stdout carries JSON results) and optionally to a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Image Browser: folder scanning and image transfer backend")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")

    sub = p.add_subparsers(dest="command", required=True)

    for name, help_text in [
        ("images", "List image files in a folder with size and creation time"),
        ("files", "List names of all regular files in a folder"),
        ("subfolders", "List direct subfolders of a folder"),
        ("tree", "Print the full subfolder tree of a folder"),
    ]:
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("folder", type=str, help="Folder to scan")

    sp = sub.add_parser("metadata", help="Show filesystem metadata of a file")
    sp.add_argument("path", type=str)

    sp = sub.add_parser("read", help="Print a file's content as base64")
    sp.add_argument("path", type=str)

    sp = sub.add_parser("copy", help="Copy an image into a folder (never overwrites)")
    sp.add_argument("source", type=str)
    sp.add_argument("target_folder", type=str)

    sp = sub.add_parser("batch", help="Apply a JSON list of pending transfers")
    sp.add_argument("pending_file", type=Path,
                    help='JSON list of {"imagePath", "targetFolder", "imageName"} objects')
    sp.add_argument("--dry-run", action="store_true", help="Simulate actions without modifying disk")
    sp.add_argument("--report-csv", type=str, default=None,
                    help=f"Write a per-file CSV report (e.g. {config.DEFAULT_REPORT_CSV})")

    return p.parse_args(argv)


def load_pending(pending_file: Path) -> List[PendingTransfer]:
    try:
        with pending_file.open("r", encoding="utf-8") as f:
            items = json.load(f)

        pending = []
        for item in items:
            image_path = item["imagePath"]
            pending.append(PendingTransfer(
                image_path=image_path,
                target_folder=item["targetFolder"],
                image_name=item.get("imageName") or file_name_of(image_path) or config.UNKNOWN_NAME,
            ))
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise PendingFileError(
            f"Cannot load pending transfers from {pending_file}: {e!r}",
            ErrorKind.INVALID_PENDING_FILE,
            str(pending_file),
        ) from e
    return pending


def run_command(args) -> object:
    if args.command == "images":
        return commands.invoke("list_images_in_folder", folder_path=args.folder)
    if args.command == "files":
        return commands.invoke("list_filenames_in_folder", folder_path=args.folder)
    if args.command == "subfolders":
        return commands.invoke("list_subfolders", path=args.folder)
    if args.command == "tree":
        return commands.invoke("get_folder_tree", path=args.folder)
    if args.command == "metadata":
        return commands.invoke("get_image_metadata", path=args.path)
    if args.command == "read":
        return commands.invoke("read_image_as_base64", path=args.path)
    if args.command == "copy":
        return commands.invoke("move_image", source_path=args.source, target_folder=args.target_folder)

    # batch
    summary = FileTransfer().execute(load_pending(args.pending_file), dry_run=args.dry_run)
    reporter = TransferReport()
    if args.report_csv:
        reporter.write_csv(summary, args.report_csv)
    result = summary.to_dict()
    if args.dry_run:
        result["message"] = "Dry run: no files were copied"
    else:
        result["message"] = reporter.summary_message(summary)
    return result


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        result = run_command(args)
    except ImageBrowserError as e:
        logging.error(str(e))
        print(json.dumps({"error": e.to_dict()}))
        return 1
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return 1
    except Exception:
        logging.exception("Fatal error.")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
