"""Output file creation with collision-safe naming."""

import warnings
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from .errors import OutputIOError, PatchRenamedWarning
from .utils import CANONICAL_ENCODING


def resolve_filename(directory: Path, filename: str) -> str:
    """
    Return filename, or filename.NNN for the first NNN not present in directory.

    Emits a PatchRenamedWarning when a suffix had to be appended.
    """
    if not (directory / filename).exists():
        return filename

    warnings.warn(f"File {filename} already exists. Renaming patch.", PatchRenamedWarning)
    appendix = 0
    while (directory / f"{filename}.{appendix:03d}").exists():
        appendix += 1
    return f"{filename}.{appendix:03d}"


class OutputFileManager:
    """Owns the single output file that is open at any time."""

    def __init__(self, directory=None, on_create: Optional[Callable[[Path], None]] = None):
        self.directory = Path(directory) if directory is not None else Path.cwd()
        self.on_create = on_create
        self.created: List[Path] = []
        self.current: Optional[TextIO] = None
        self.current_path: Optional[Path] = None

    def create_file(self, stem: str, suffix: str = ".patch") -> TextIO:
        """Close any open output, then create and open stem + suffix."""
        self.close_current()

        filename = resolve_filename(self.directory, f"{stem}{suffix}")
        path = self.directory / filename
        try:
            # newline="" keeps the input's line terminators byte for byte
            self.current = open(path, "w", encoding=CANONICAL_ENCODING, newline="")
        except OSError as e:
            raise OutputIOError(path, e.strerror or str(e)) from e

        self.current_path = path
        self.created.append(path)
        if self.on_create:
            self.on_create(path)
        return self.current

    def write(self, text: str) -> bool:
        """Append text to the open output. Returns False (and drops text) if none is open."""
        if self.current is None:
            return False
        try:
            self.current.write(text)
        except OSError as e:
            raise OutputIOError(self.current_path, e.strerror or str(e)) from e
        return True

    def close_current(self):
        if self.current is None:
            return
        handle, path = self.current, self.current_path
        self.current = None
        self.current_path = None
        try:
            handle.close()
        except OSError as e:
            raise OutputIOError(path, e.strerror or str(e)) from e

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close_current()
