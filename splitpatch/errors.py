class SplitPatchError(Exception):
    pass


class UnreadableInput(SplitPatchError, FileNotFoundError):
    pass


class DecodingError(SplitPatchError, ValueError):
    def __init__(self, line_number, encoding, reason=""):
        super().__init__()
        self.line_number = line_number
        self.encoding = encoding
        self.reason = reason

    def __str__(self):
        message = f"Could not decode line {self.line_number} as {self.encoding}"
        if self.reason:
            message += f": {self.reason}"
        return message


class OutputIOError(SplitPatchError, OSError):
    def __init__(self, filename, reason=""):
        super().__init__()
        self.filename = filename
        self.reason = reason

    def __str__(self):
        return f"Could not write output file {self.filename}: {self.reason}"


class TruncatedHeaderError(SplitPatchError, ValueError):
    pass


class MissingPathError(SplitPatchError, ValueError):
    pass


class PatchRenamedWarning(UserWarning):
    # non-fatal: the output name was taken and a numeric suffix was appended
    pass
