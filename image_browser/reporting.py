import csv
import logging
from pathlib import Path
from typing import Union

from .models import TransferSummary
from . import config


def _plural(count: int) -> str:
    return "file" if count == 1 else "files"


class TransferReport:
    """Turns a batch TransferSummary into the user-facing message and a CSV log."""

    def summary_message(self, summary: TransferSummary) -> str:
        if not summary.outcomes:
            return "No files to copy"
        if summary.succeeded == 0:
            return "Failed to copy any files"

        message = f"Successfully copied {summary.succeeded} {_plural(summary.succeeded)}!"
        if summary.failed:
            message += f" {summary.failed} {_plural(summary.failed)} failed to copy."
        return message

    def write_csv(self, summary: TransferSummary, output_csv: Union[str, Path]):
        """
        One row per attempted transfer:
        source path, target folder, status, and the confirmation or error message.
        """
        logging.info(f"Writing transfer report -> {output_csv}")

        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(config.REPORT_HEADERS)

            for outcome in summary.outcomes:
                writer.writerow([
                    outcome.pending.image_path,
                    outcome.pending.target_folder,
                    "Copied" if outcome.success else "Failed",
                    outcome.message,
                ])

        logging.info(f"Report complete. {len(summary.outcomes)} rows written.")
