#!/usr/bin/env python3
import argparse
import sys
import warnings
from pathlib import Path

from . import __version__
from .errors import SplitPatchError
from .split import SplitOptions, split_patch
from .utils import CANONICAL_ENCODING

LICENSE = "GPL-2.0-or-later"
HOMEPAGE = "https://github.com/jaalto/splitpatch"

DESCRIPTION = """\
Split a patch or diff file into pieces, either one patch per modified
file or one patch per hunk. This makes it possible to separate changes
that might not be desirable, or to assemble the patch into a more
coherent set of changes.

Output files are written to the current directory (see --directory).
An existing file is never overwritten: a .NNN suffix is appended instead.
"""


def show_warning(message, category, filename, lineno, file=None, line=None):
    # plain one-line notices instead of the usual file:line prefix
    print(message, file=file or sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="splitpatch",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", help="patch file to split")
    parser.add_argument(
        "-H", "--hunk", "--hunks", dest="hunks", action="store_true",
        help="write one patch per hunk instead of one per file"
    )
    parser.add_argument(
        "-f", "--fullname", action="store_true",
        help="name outputs after the whole path (a/b/c.txt -> a-b-c.txt) instead of the basename"
    )
    parser.add_argument(
        "-e", "--encode", "--encoding", dest="encoding", default=CANONICAL_ENCODING,
        help=f"encoding of the input patch (default: {CANONICAL_ENCODING})"
    )
    parser.add_argument(
        "-d", "--directory", type=Path, default=None,
        help="write output files to DIRECTORY instead of the current directory"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="print the name of every created file"
    )
    parser.add_argument(
        "-V", "--version", action="version",
        version=f"%(prog)s {__version__} {LICENSE} {HOMEPAGE}"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    options = SplitOptions(
        hunks=args.hunks,
        fullname=args.fullname,
        encoding=args.encoding,
        directory=args.directory,
        verbose=args.verbose,
    )

    if options.directory is not None and not options.directory.is_dir():
        print(f"Error: output directory does not exist: {options.directory}", file=sys.stderr)
        return 1

    on_create = (lambda path: print(f"Created {path}")) if options.verbose else None

    with warnings.catch_warnings():
        warnings.simplefilter("always")
        warnings.showwarning = show_warning
        try:
            split_patch(args.file, options, on_create=on_create)
        except SplitPatchError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
