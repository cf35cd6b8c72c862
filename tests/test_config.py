import logging
import logging.config

from booking_registry_api.app.core import config
from booking_registry_api.app.core.config import Settings
from booking_registry_api.app.core.logging_config import (
    LOG_FORMAT,
    setup_logging,
    uvicorn_log_config,
)


def test_defaults():
    settings = Settings()
    assert settings.project_name
    assert isinstance(settings.port, int)


def test_env_flag(monkeypatch):
    monkeypatch.setenv("SEED_BOOKINGS", "Yes")
    assert config._env_flag("SEED_BOOKINGS", "false") is True
    monkeypatch.setenv("SEED_BOOKINGS", "0")
    assert config._env_flag("SEED_BOOKINGS", "true") is False
    monkeypatch.delenv("SEED_BOOKINGS")
    assert config._env_flag("SEED_BOOKINGS", "true") is True


def test_setup_logging_is_idempotent(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("debug")
    setup_logging("warning")

    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG


def test_setup_logging_writes_to_file(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "registry.log"

    setup_logging("info", str(logfile))
    logging.getLogger("booking_registry_api.test").info("booking %s created", 7)
    for handler in root.handlers:
        handler.flush()
    root.handlers[-1].close()

    assert "[INFO] booking_registry_api.test: booking 7 created" in logfile.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("chatty")

    assert root.level == logging.INFO


def test_uvicorn_log_config_shares_format_and_level():
    log_config = uvicorn_log_config("warning")

    assert log_config["formatters"]["default"]["format"] == LOG_FORMAT
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        assert log_config["loggers"][name] == {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        }
    assert uvicorn_log_config("chatty")["loggers"]["uvicorn"]["level"] == "INFO"

    logging.config.dictConfig(log_config)
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
