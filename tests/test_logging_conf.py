"""Logging setup tests."""
import io
import logging
from logging.handlers import RotatingFileHandler

import pytest

from nbprate.shared.logging_conf import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_stream():
    stream = io.StringIO()
    setup_logging(level=logging.WARNING, stream=stream)
    logging.getLogger("nbprate.test").warning("skipped %s", "2023-03-18")
    assert "WARNING nbprate.test :: skipped 2023-03-18" in stream.getvalue()


def test_log_dir_adds_rotating_file(tmp_path):
    setup_logging(log_dir=tmp_path / "logs", log_to_console=False)
    handlers = logging.getLogger().handlers
    assert any(isinstance(h, RotatingFileHandler) for h in handlers)
    assert (tmp_path / "logs" / "nbprate.log").exists()
