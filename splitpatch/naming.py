"""Derive output filename stems from patch header lines."""

from enum import Enum
from typing import Sequence


class NamingPolicy(Enum):
    SHORT = "short"  # last path segment only
    FULL = "full"    # whole path flattened with "-"


# stem produced for /dev/null under each policy
NULL_STEMS = {
    NamingPolicy.SHORT: "null",
    NamingPolicy.FULL: "dev-null",
}


def get_filename(line: str, policy: NamingPolicy = NamingPolicy.SHORT) -> str:
    """
    Extract a filename stem from a `---`, `+++` or `Index:` line.

    The path is the second whitespace separated token. Anything from the
    first ":" onward (revision or timestamp suffix) is dropped.

    >>> get_filename("--- a/foo/bar.c\\n")
    'bar.c'
    >>> get_filename("--- a/foo/bar.c\\n", NamingPolicy.FULL)
    'a-foo-bar.c'
    """
    tokens = line.split()
    if len(tokens) < 2:
        return ""
    path = tokens[1].split(":")[0]
    segments = [s for s in path.split("/") if s]
    if not segments:
        return ""

    if policy is NamingPolicy.FULL:
        return "-".join(segments)
    return segments[-1]


def get_filename_by_header(header: Sequence[str], policy: NamingPolicy = NamingPolicy.SHORT) -> str:
    """Name a unified section, falling back to the `+++` line when `---` is /dev/null."""
    filename = get_filename(header[0], policy)
    if filename == NULL_STEMS[policy] and len(header) > 1:
        filename = get_filename(header[1], policy)
    return filename
