from .. import config

_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'abcdefghijklmnopqrstuvwxyz',
)


def image_extension(filename: str) -> str:
    """
    Returns the lower-cased extension of filename without the dot,
    or '' when there is none.

    Same rule as Path.suffix: a dot at position 0 marks a hidden file,
    not an extension.
    """
    dot = filename.rfind('.')
    if not 0 < dot < len(filename) - 1:
        return ''
    # ASCII-only lowering; 'İ'.lower() etc. must not create matches
    return filename[dot + 1:].translate(_ASCII_LOWER)


def is_supported_image(filename: str) -> bool:
    """Pure check: does this file name denote a supported image type?"""
    return image_extension(filename) in config.IMAGE_EXTENSIONS
