"""Content-based file type detection."""

import mimetypes
from pathlib import Path

from dirtools.types import PathType

# Leading bytes of common binary formats, checked in order
MAGIC_NUMBERS = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"%PDF-", "application/pdf"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b", "application/gzip"),
    (b"\x7fELF", "application/x-executable"),
)

EMPTY_MIME_TYPE = "application/x-empty"
TEXT_MIME_TYPE = "text/plain"
BINARY_MIME_TYPE = "application/octet-stream"

TEXT_ENCODINGS = ("utf-8", "utf-16")


def is_binary_chunk(chunk: bytes) -> bool:
    """Tell whether a chunk of file content looks binary.

    A chunk is binary when it holds a null byte, when it cannot be decoded as text, or
    when more than 1% of it is control characters other than tab, newline and carriage
    return.

    Example:
        >>> is_binary_chunk(b"plain text\\n")
        False
        >>> is_binary_chunk(b"\\x00\\x01\\x02")
        True
    """
    if not chunk:
        return False
    if b"\0" in chunk:
        return True

    for encoding in TEXT_ENCODINGS:
        try:
            chunk.decode(encoding)
        except UnicodeDecodeError:
            continue
        control_chars = sum(1 for byte in chunk if byte < 32 and byte not in (9, 10, 13))
        return control_chars / len(chunk) > 0.01
    return True


def guess_mime_type(file_path: PathType, chunk_size: int = 8192) -> str:
    """Guess the MIME type of a file from its content.

    Known binary signatures are recognized first. Text content gets the type its name
    suggests when that is a text type, ``text/plain`` otherwise. Empty files are
    ``application/x-empty`` and other binary content ``application/octet-stream``,
    unless the name suggests a more precise type.

    Args:
        file_path: Path of the file to inspect.
        chunk_size: Number of leading bytes to read.

    Returns:
        The MIME type.

    Raises:
        OSError: If the file cannot be read.
    """
    path_obj = Path(file_path)
    with open(path_obj, "rb") as file:
        chunk = file.read(chunk_size)

    if not chunk:
        return EMPTY_MIME_TYPE

    for magic, mime in MAGIC_NUMBERS:
        if chunk.startswith(magic):
            return mime

    guessed, _ = mimetypes.guess_type(path_obj.name)
    if not is_binary_chunk(chunk):
        return guessed if guessed and guessed.startswith("text/") else TEXT_MIME_TYPE
    return guessed or BINARY_MIME_TYPE
