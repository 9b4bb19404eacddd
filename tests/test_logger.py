import logging
from src.core.logger import ConformerLogger


def test_finalize_closes_file_handler(tmp_path):
    """Finalizing releases the log file so repeated runs do not leak handles."""
    logger = ConformerLogger(log_dir=str(tmp_path / "logs"))
    file_handler = next(h for h in logger.logger.handlers if isinstance(h, logging.FileHandler))

    log_file = logger.finalize()

    assert log_file is not None
    assert file_handler.stream is None
    assert not any(isinstance(h, logging.FileHandler) for h in logger.logger.handlers)


def test_new_logger_closes_previous_handler(tmp_path):
    first = ConformerLogger(log_dir=str(tmp_path / "first"))
    file_handler = next(h for h in first.logger.handlers if isinstance(h, logging.FileHandler))

    ConformerLogger()

    assert file_handler.stream is None


def test_owns_path(tmp_path):
    logger = ConformerLogger(log_dir=str(tmp_path / "logs"))

    assert logger.owns_path(str(tmp_path / "logs"))
    assert logger.owns_path(str(logger.log_file))
    assert not logger.owns_path(str(tmp_path / "a1.mkv"))
    logger.finalize()


def test_owns_path_without_log_dir():
    assert not ConformerLogger().owns_path("show/a1.mkv")
