# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

from seo_doctor.logger import LOGGER_NAME, init_logging, logger


def own_handlers(lg: logging.Logger) -> list:
    """Handlers installed by init_logging; pytest adds its capture handlers too."""
    return [h for h in lg.handlers if type(h) in (logging.StreamHandler, RotatingFileHandler)]


def test_shared_logger_defaults():
    lg = init_logging()
    assert lg is logger
    assert lg.name == LOGGER_NAME
    assert lg.level == logging.WARNING
    assert lg.propagate is False
    assert len(own_handlers(lg)) == 1


def test_file_output_and_no_duplicate_handlers(tmp_path):
    log_file = tmp_path / "seo.log"
    lg = init_logging(level="DEBUG", log_file=log_file)
    init_logging(level="DEBUG", log_file=log_file)

    assert len(own_handlers(lg)) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)

    lg.debug("fetched %s", "https://example.com/")
    for handler in lg.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert text.count("fetched https://example.com/") == 1
    assert "| DEBUG    | SEODoctor |" in text
