import errno
import os
from typing import List
from .errors import DirectoryOpenError, DirectoryEntryError


class FileSystemManager:
    @staticmethod
    def list_directory(path: str) -> List[str]:
        """Return full entry paths of a directory, sorted as plain strings.

        Opening the directory may fail without ending the run; a failure
        while reading entries aborts the whole listing.
        """
        try:
            scanner = os.scandir(path)
        except OSError as e:
            raise DirectoryOpenError(path, e) from e

        with scanner:
            try:
                entries = [entry.path for entry in scanner]
            except OSError as e:
                raise DirectoryEntryError(path, e) from e

        entries.sort()
        return entries

    @staticmethod
    def rename_file(old_path: str, new_path: str) -> str:
        """Rename a file, refusing to replace an existing target."""
        if os.path.lexists(new_path):
            raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), new_path)
        os.rename(old_path, new_path)
        return new_path
