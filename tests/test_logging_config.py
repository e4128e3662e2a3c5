import logging
import os
from logging_config import setup_logging

def test_setup_logging_writes_errors_to_file(tmp_path):
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        log_file = setup_logging("web", "INFO", str(tmp_path / "logs"), console=False)
        assert os.path.dirname(log_file) == str(tmp_path / "logs")
        assert os.path.basename(log_file).startswith("web_")
        logging.getLogger("moves").info("not written")
        logging.getLogger("parser").error("written")
        for handler in root.handlers:
            handler.flush()
        with open(log_file) as f:
            text = f.read()
        assert "ERROR - written" in text
        assert "not written" not in text
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])

def test_setup_logging_without_handlers():
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        assert setup_logging("console", "DEBUG", None, console=False) is None
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
