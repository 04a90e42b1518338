"""Structural line predicates, in the order they are checked."""

LEGACY_PREFIX = "Index: "
FILE_HEADER_START_PREFIX = "--- "
HUNK_PREFIX = "@@ "
HUNK_SUFFIX = " @@"


def is_index_line(line):
    return line.startswith(LEGACY_PREFIX)


def is_file_header_start(line):
    return line.startswith(FILE_HEADER_START_PREFIX)


def is_hunk_header(line):
    # "@@ <anything> @@", anchored at the start of the line
    return line.startswith(HUNK_PREFIX) and HUNK_SUFFIX in line[len(HUNK_PREFIX):]


predicates = {
    "INDEX_LINE": is_index_line,
    "FILE_HEADER_START": is_file_header_start,
    "HUNK_HEADER": is_hunk_header,
}


def match_line(line):
    """Return the first marker type whose predicate accepts line, else None."""
    for line_type, predicate in predicates.items():
        if predicate(line):
            return line_type
    return None
