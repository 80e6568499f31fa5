"""
Configuration constants for the image browser backend.
"""

# --- File Type Definitions ---
# Extensions are stored without the leading dot, lower-cased.
IMAGE_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif', 'bmp', 'webp', 'tiff', 'svg'}

# --- Metadata ---
# Used when a path has no final component to take a file name from.
UNKNOWN_NAME = "unknown"

# --- Transfer ---
COPY_SUCCESS_TEMPLATE = "Successfully copied {name} to {target}"
COPY_FAILURE_TEMPLATE = 'Failed to copy "{name}": {error}'

# --- Reporting ---
REPORT_HEADERS = ["Source Path", "Target Folder", "Status", "Message"]
DEFAULT_REPORT_CSV = "transfer_report.csv"
