"""
Split a patch into one patch per file or one patch per hunk.

1. lines are decoded one at a time from the input patch
2. each line is classified as a section header, a hunk header or body
3. a section header (Index: or ---/+++) names the output file(s)
    a. by file: a new <stem>.patch is opened right away
    b. by hunk: the header is buffered and every following hunk gets its
       own <stem>.NNN.patch that starts with a copy of the header
4. body lines go to whichever output is open; before the first output
   exists they are dropped
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .classifier import LineType, PatchClassifier
from .errors import MissingPathError, TruncatedHeaderError
from .naming import NamingPolicy, get_filename, get_filename_by_header
from .output import OutputFileManager
from .utils import CANONICAL_ENCODING, check_readable, decode_lines

PATCH_SUFFIX = ".patch"
LEGACY_HEADER_LINES = 3  # lines following "Index: " that belong to the header


@dataclass
class SplitOptions:
    hunks: bool = False
    fullname: bool = False
    encoding: str = CANONICAL_ENCODING
    directory: Optional[Path] = None
    verbose: bool = False

    @property
    def policy(self) -> NamingPolicy:
        return NamingPolicy.FULL if self.fullname else NamingPolicy.SHORT


def read_header_lines(lines: Iterator[str], count: int, first_line: str) -> List[str]:
    """Pull the next count lines that belong to the header started by first_line."""
    header = []
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            raise TruncatedHeaderError(f"Patch ends inside the header starting with: {first_line.rstrip()}")
        header.append(line)
    return header


def require_stem(stem: str, header_line: str) -> str:
    """Reject a section header that names no file, so no ".patch" dot-file is created."""
    if not stem:
        raise MissingPathError(f"Section header has no file path: {header_line.rstrip()}")
    return stem


def split_by_file(lines: Iterable[str], policy=NamingPolicy.SHORT, output=None) -> List[Path]:
    """
    Write every file section of the patch to its own <stem>.patch.

    Parameters
    ----------
    lines : iterable of str
        Decoded patch lines, terminators included
    policy : NamingPolicy
        How to turn header paths into filename stems
    output : OutputFileManager, optional
        Where to create files; defaults to one rooted at the CWD

    Returns
    -------
    list of Path
        Created files in creation order
    """
    output = output or OutputFileManager()
    classifier = PatchClassifier()
    lines = iter(lines)

    with output:
        for line in lines:
            match classifier.classify(line):
                case LineType.NEW_LEGACY_SECTION:
                    output.create_file(require_stem(get_filename(line, policy), line), PATCH_SUFFIX)
                    output.write(line)
                case LineType.NEW_UNIFIED_SECTION:
                    header = [line, *read_header_lines(lines, 1, line)]
                    stem = require_stem(get_filename_by_header(header, policy), line)
                    output.create_file(stem, PATCH_SUFFIX)
                    output.write("".join(header))
                case _:
                    # hunk headers are ordinary content here
                    output.write(line)

    return output.created


def split_by_hunk(lines: Iterable[str], policy=NamingPolicy.SHORT, output=None) -> List[Path]:
    """
    Write every hunk of the patch to its own <stem>.NNN.patch.

    Each hunk file starts with the header of the section the hunk belongs
    to: the Index: line plus the three lines after it in a legacy patch,
    or the ---/+++ pair in a unified one. NNN counts hunks per section,
    starting at 000.
    """
    output = output or OutputFileManager()
    classifier = PatchClassifier()
    lines = iter(lines)

    filename = None
    header = []
    counter = 0

    with output:
        for line in lines:
            match classifier.classify(line):
                case LineType.NEW_LEGACY_SECTION:
                    filename = require_stem(get_filename(line, policy), line)
                    header = [line, *read_header_lines(lines, LEGACY_HEADER_LINES, line)]
                    counter = 0
                case LineType.NEW_UNIFIED_SECTION:
                    header = [line, *read_header_lines(lines, 1, line)]
                    filename = require_stem(get_filename_by_header(header, policy), line)
                    counter = 0
                case LineType.NEW_HUNK if filename is not None:
                    output.create_file(filename, f".{counter:03d}{PATCH_SUFFIX}")
                    counter += 1
                    output.write("".join(header))
                    output.write(line)
                case _:
                    output.write(line)

    return output.created


def split_patch(path, options: Optional[SplitOptions] = None, on_create=None) -> List[Path]:
    """Split the patch file at path according to options."""
    options = options or SplitOptions()
    path = check_readable(path)
    output = OutputFileManager(options.directory, on_create=on_create)
    splitter = split_by_hunk if options.hunks else split_by_file

    with open(path, "rb") as stream:
        return splitter(decode_lines(stream, options.encoding), options.policy, output)
