from enum import Enum
from typing import Tuple

from splitpatch.markers import match_line


class PatchMode(Enum):
    UNDETERMINED = "undetermined"
    LEGACY = "legacy"      # Index: based
    UNIFIED = "unified"    # ---/+++ based


class LineType(Enum):
    NEW_LEGACY_SECTION = "new_legacy_section"
    NEW_UNIFIED_SECTION = "new_unified_section"
    NEW_HUNK = "new_hunk"
    BODY = "body"


def classify_line(line: str, mode: PatchMode) -> Tuple[LineType, PatchMode]:
    """
    Classify one line given the current patch mode.

    Returns:
        Tuple of (line_type, new_mode)

    An `Index: ` line always wins and freezes the mode to LEGACY. A `--- `
    line only opens a unified section while the mode is not LEGACY; after
    that it is ordinary body content.
    """
    match match_line(line):
        case "INDEX_LINE":
            return LineType.NEW_LEGACY_SECTION, PatchMode.LEGACY
        case "FILE_HEADER_START" if mode is not PatchMode.LEGACY:
            return LineType.NEW_UNIFIED_SECTION, PatchMode.UNIFIED
        case "HUNK_HEADER":
            return LineType.NEW_HUNK, mode
        case _:
            return LineType.BODY, mode


class PatchClassifier:
    """Carries the run-wide patch mode across calls to classify_line."""

    def __init__(self, mode=PatchMode.UNDETERMINED):
        self.mode = mode

    @property
    def legacy(self):
        return self.mode is PatchMode.LEGACY

    def classify(self, line):
        line_type, self.mode = classify_line(line, self.mode)
        return line_type
