import pytest
from pydantic import ValidationError
from src.core.errors import SelectionError
from src.core.normalize import EpisodeNormalizer
from src.core.schema_internal import RenameConfig


def test_find_all_numbers_without_digits():
    """A path without digits yields no numbers."""
    assert EpisodeNormalizer.find_all_numbers("show/episode.mkv") == []


def test_find_all_numbers_order_and_leading_zeros():
    """Runs come back left to right as strings, zeros intact."""
    assert EpisodeNormalizer.find_all_numbers("Show.S01E05.mkv") == ["01", "05"]
    assert EpisodeNormalizer.find_all_numbers("ep007-x264-1080p.mkv") == ["007", "264", "1080"]


def test_find_all_numbers_scans_directory_components():
    """Digits in parent directories are found before the filename's."""
    assert EpisodeNormalizer.find_all_numbers("/media/Season1/episode.10.mkv") == ["1", "10"]


def test_find_all_numbers_keeps_duplicates():
    assert EpisodeNormalizer.find_all_numbers("a1b1c1") == ["1", "1", "1"]


def test_format_numbers_matches_list_output():
    assert EpisodeNormalizer.format_numbers(["01", "05"]) == '["01", "05"]'
    assert EpisodeNormalizer.format_numbers([]) == "[]"


@pytest.mark.parametrize("filepath, extension", [
    ("show/episode.10.mkv", "mkv"),
    ("show/episode", "show/episode"),
    ("show/episode.", ""),
    ("v1.0/episode", "0/episode"),
])
def test_get_file_extension(filepath, extension):
    """Extension is whatever follows the last '.' of the full path."""
    assert EpisodeNormalizer.get_file_extension(filepath) == extension


def test_select_number():
    assert EpisodeNormalizer.select_number(["1", "10"], 1, "Season1/episode.10.mkv") == "10"


def test_select_number_without_index():
    with pytest.raises(SelectionError, match="invalid number selected"):
        EpisodeNormalizer.select_number(["1", "10"], None, "Season1/episode.10.mkv")


def test_select_number_out_of_range():
    with pytest.raises(SelectionError, match="out of range"):
        EpisodeNormalizer.select_number(["1", "10"], 5, "Season1/episode.10.mkv")


def test_format_title_uses_path_as_prefix():
    """The configured directory is glued to the episode marker with no separator."""
    config = RenameConfig(path="/media/Season1", selected_index=0)
    assert EpisodeNormalizer.format_title("mkv", "1", config) == "/media/Season1E1.mkv"


def test_formatted_number_survives_reextraction():
    """Re-reading a formatted name gives back the same digit string."""
    config = RenameConfig(path="show", selected_index=0)
    title = EpisodeNormalizer.format_title("mkv", "007", config)
    assert title == "showE007.mkv"
    assert EpisodeNormalizer.find_all_numbers(title) == ["007"]


def test_config_is_frozen():
    config = RenameConfig(path="show")
    with pytest.raises(ValidationError):
        config.path = "other"
