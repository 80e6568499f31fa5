import contextlib
import os
import shutil
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Iterable, Optional, Union

from tqdm import tqdm

from .. import config
from ..exceptions import ErrorKind, FileOperationError, ImageBrowserError
from ..metadata.extract import file_name_of
from ..models import PendingTransfer, TransferOutcome, TransferSummary

PathLike = Union[str, os.PathLike]


class FileTransfer:
    """
    Copies images into library folders.

    The front end calls this a "move", but the source is always kept.
    Existing destination files are never overwritten. There is no lock
    around the exists-check and the copy: two concurrent requests for the
    same destination must be serialized by the caller.
    """

    def copy_image(self, source_path: PathLike, target_folder: PathLike) -> str:
        """
        Copies source_path into target_folder under its own file name.

        Checks, in order: source exists, target is a directory, source has
        a usable file name, destination is free. Nothing is written unless
        all of them pass.

        Returns:
            Confirmation message.
        """
        src = os.fspath(source_path)
        target = os.fspath(target_folder)

        if not os.path.exists(src):
            raise FileOperationError(f"Source file does not exist: {src}", ErrorKind.SOURCE_NOT_FOUND, src)

        if not os.path.isdir(target):
            raise FileOperationError(
                f"Target folder does not exist or is not a directory: {target}",
                ErrorKind.TARGET_NOT_FOUND,
                target,
            )

        name = file_name_of(src)
        if name is None:
            raise FileOperationError(f"Invalid source file path: {src}", ErrorKind.INVALID_SOURCE_PATH, src)

        dest = os.path.join(target, name)
        if os.path.lexists(dest):
            raise FileOperationError(
                f"File already exists in target folder: {dest}",
                ErrorKind.TARGET_ALREADY_EXISTS,
                dest,
            )

        try:
            shutil.copy(src, dest)
        except OSError as e:
            # dest was free before the copy, so anything there now is ours
            with contextlib.suppress(OSError):
                os.remove(dest)
            raise FileOperationError(str(e), ErrorKind.COPY_IO_ERROR, dest) from e

        logging.info(f"Copied {src} -> {dest}")
        return config.COPY_SUCCESS_TEMPLATE.format(name=name, target=target)

    def copy_image_async(self,
                         source_path: PathLike,
                         target_folder: PathLike,
                         executor: Optional[Executor] = None) -> "Future[str]":
        """
        Runs copy_image off the caller's thread. Errors are raised from
        Future.result(). Not cancellable once started.
        """
        if executor is not None:
            return executor.submit(self.copy_image, source_path, target_folder)

        own = ThreadPoolExecutor(max_workers=1, thread_name_prefix="image-copy")
        try:
            return own.submit(self.copy_image, source_path, target_folder)
        finally:
            # Let the submitted copy finish in the background.
            own.shutdown(wait=False)

    def execute(self, pending: Iterable[PendingTransfer], dry_run: bool = False) -> TransferSummary:
        """
        Applies queued transfers one after another. A failed transfer is
        recorded and the batch carries on.
        """
        tasks = list(pending)
        summary = TransferSummary()

        if not tasks:
            logging.info("No files need copying.")
            return summary

        logging.info(f"Processing {len(tasks)} files (DryRun={dry_run})...")

        for task in tqdm(tasks, desc="Copying"):
            if dry_run:
                logging.info(f"[DRY RUN] Copy {task.image_path} -> {task.target_folder}")
                continue

            try:
                message = self.copy_image(task.image_path, task.target_folder)
                summary.outcomes.append(TransferOutcome(task, True, message))
            except ImageBrowserError as e:
                message = config.COPY_FAILURE_TEMPLATE.format(name=task.image_name, error=e)
                logging.error(message)
                summary.outcomes.append(TransferOutcome(task, False, message))

        logging.info(f"Copy complete: {summary.succeeded} succeeded, {summary.failed} failed.")
        return summary
