import logging

from logging_config import configure_logging, get_logger


def test_configure_logging_writes_log_file(tmp_path):
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    log_path = tmp_path / "run.log"

    try:
        configure_logging(logging.INFO, log_file=str(log_path))
        get_logger("tests.logfile").info("state vector computed")
        for h in root.handlers:
            h.flush()
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    finally:
        for h in root.handlers[:]:
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)

    assert len(file_handlers) == 1
    text = log_path.read_text()
    assert "tests.logfile - INFO - state vector computed" in text
