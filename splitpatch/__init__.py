from .classifier import LineType, PatchClassifier, PatchMode, classify_line
from .errors import (
    DecodingError,
    MissingPathError,
    OutputIOError,
    PatchRenamedWarning,
    SplitPatchError,
    TruncatedHeaderError,
    UnreadableInput,
)
from .naming import NamingPolicy, get_filename, get_filename_by_header
from .output import OutputFileManager
from .split import SplitOptions, split_by_file, split_by_hunk, split_patch
from .utils import decode_lines

__version__ = "1.1"
