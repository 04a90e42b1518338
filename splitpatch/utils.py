import codecs
import os
from pathlib import Path

from splitpatch.errors import DecodingError, UnreadableInput

CANONICAL_ENCODING = "utf-8"


def check_readable(path):
    """Raise UnreadableInput unless path is an existing, readable regular file."""
    path = Path(path)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise UnreadableInput(f"File does not exist or is not readable: {path}")
    return path


def transcode_line(raw, encoding, line_number=0):
    """Convert one raw line to canonical text, keeping its line terminator."""
    if isinstance(raw, str):
        text = raw
    else:
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise DecodingError(line_number, encoding, e.reason) from e

    # text must survive a round trip through the canonical encoding
    try:
        text.encode(CANONICAL_ENCODING)
    except UnicodeEncodeError as e:
        raise DecodingError(line_number, encoding, e.reason) from e
    return text


def decode_lines(stream, encoding=CANONICAL_ENCODING):
    """
    Lazily yield the lines of stream as canonical text.

    Parameters
    ----------
    stream : iterable
        Binary file object or any iterable of byte (or str) lines
    encoding : str
        Name of the encoding the input was written in

    Yields
    ------
    str
        Each line with its original terminator

    Raises
    ------
    DecodingError
        If the encoding is unknown or a line cannot be transcoded
    """
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise DecodingError(0, encoding, "unknown encoding") from e

    for i, raw in enumerate(stream):
        yield transcode_line(raw, encoding, i + 1)
