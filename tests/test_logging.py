import logging

from thelook.config import Settings
from thelook.logging_config import configure_logging


def test_log_file_receives_module_records(tmp_path, monkeypatch):
    root = logging.getLogger("thelook")
    monkeypatch.setattr(root, "handlers", [])
    settings = Settings(log_file="api.log", log_dir=str(tmp_path / "logs"), _env_file=None)

    logger = configure_logging(settings)
    logging.getLogger("thelook.routers.booking_routes").info("Created booking 1")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "Created booking 1" in (tmp_path / "logs" / "api.log").read_text()

    for handler in logger.handlers:
        handler.close()


def test_configuring_twice_keeps_one_set_of_handlers(monkeypatch):
    monkeypatch.setattr(logging.getLogger("thelook"), "handlers", [])
    settings = Settings(log_level="debug", _env_file=None)

    configure_logging(settings)
    logger = configure_logging(settings)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
