class ConformerError(Exception):
    """Base class for errors raised while conforming a directory."""


class DirectoryOpenError(ConformerError):
    """The target directory could not be opened. Reported, not fatal."""

    def __init__(self, path: str, reason: OSError):
        self.path = path
        self.reason = reason
        super().__init__(str(reason))


class DirectoryEntryError(ConformerError):
    """An entry could not be read while enumerating the directory."""

    def __init__(self, path: str, reason: OSError):
        self.path = path
        self.reason = reason
        super().__init__(f"reading entry in {path}: {reason}")


class SelectionError(ConformerError):
    """The selected number index is missing or out of range for a file."""
