import logging

from artlink import create_app
from artlink.config import TestConfig


def _own_handlers(app):
    return [h for h in app.logger.handlers if getattr(h, "_artlink", False)]


def test_repeated_app_creation_keeps_one_set_of_log_handlers():
    create_app(TestConfig)
    app = create_app(TestConfig)

    handlers = _own_handlers(app)
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert app.logger.level == logging.WARNING


def test_file_logging_writes_under_log_dir(tmp_path):
    class FileLogConfig(TestConfig):
        LOG_TO_FILE = True
        LOG_DIR = str(tmp_path / "logs")

    app = create_app(FileLogConfig)

    assert (tmp_path / "logs" / "artlink.log").exists()
    assert len(_own_handlers(app)) == 2

    for h in _own_handlers(app):
        app.logger.removeHandler(h)
        h.close()
