import json
import re
from typing import List, Optional
from .errors import SelectionError
from .schema_internal import RenameConfig


DIGIT_RUN = re.compile(r'\d+')


class EpisodeNormalizer:
    @staticmethod
    def find_all_numbers(filepath: str) -> List[str]:
        """Return every digit run in the path, left to right.

        The whole path is scanned, directory components included, so a
        season folder like ``Season1`` contributes its ``1`` first. Runs are
        kept as strings; leading zeros survive.
        """
        return DIGIT_RUN.findall(filepath)

    @staticmethod
    def format_numbers(numbers: List[str]) -> str:
        """Render a number list the way list mode prints it: ["01", "05"]."""
        return json.dumps(numbers, ensure_ascii=False)

    @staticmethod
    def get_file_extension(filepath: str) -> str:
        """Last segment after splitting on '.'.

        A path without any '.' is its own extension, a trailing '.' gives ''.
        """
        return filepath.split('.')[-1]

    @staticmethod
    def select_number(numbers: List[str], index: Optional[int], filepath: str) -> str:
        """Pick the episode number for one file."""
        if index is None:
            raise SelectionError("invalid number selected")
        if index >= len(numbers):
            raise SelectionError(
                f"number index {index} out of range for '{filepath}': "
                f"only {len(numbers)} number(s) found {EpisodeNormalizer.format_numbers(numbers)}"
            )
        return numbers[index]

    @staticmethod
    def format_title(file_extension: str, number: str, config: RenameConfig) -> str:
        # The configured path is the prefix, with no separator in between.
        return f"{config.path}E{number}.{file_extension}"
