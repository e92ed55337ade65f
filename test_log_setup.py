import logging
import os
import tempfile

import pytest

from log_setup import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_records_go_to_log_file(restore_root_logger):
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "gridvi.log")

        configure_logging(path, "INFO")
        logging.getLogger("gridvi.test").info("loaded people.csv")
        for handler in restore_root_logger.handlers:
            handler.flush()

        with open(path, encoding="utf-8") as f:
            text = f.read()
        assert "INFO - gridvi.test - loaded people.csv" in text
        assert restore_root_logger.level == logging.INFO


def test_unwritable_log_path_falls_back_to_null_handler(restore_root_logger):
    configure_logging("/definitely/not/here/gridvi.log")

    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], logging.NullHandler)
