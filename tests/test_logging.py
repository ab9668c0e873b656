import json
import logging
import logging.handlers

import pytest

from intname.config import Settings
from intname.utils.logging import get_logger, setup_logging, setup_logging_from_settings


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger("intname")
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


def test_console_only(capsys):
    setup_logging(level="INFO")
    get_logger("intname.test").info("hola", extra={"width": "i64"})
    assert "[width:i64] hola" in capsys.readouterr().out


def test_root_logger_untouched():
    root = logging.getLogger()
    before = (list(root.handlers), root.level)
    setup_logging(level="DEBUG")
    assert (list(root.handlers), root.level) == before
    assert logging.getLogger("intname").propagate is False


def test_file_and_json_handlers(tmp_path):
    setup_logging(level="DEBUG", log_file="intname.log", log_dir=str(tmp_path))
    logger = get_logger("intname.test")
    logger.debug("periodo rechazado", extra={"source": "text_norm"})
    for handler in logging.getLogger("intname").handlers:
        handler.flush()

    text = (tmp_path / "intname.log").read_text(encoding="utf-8")
    assert "[text_norm] periodo rechazado" in text
    assert "[text_norm] [text_norm]" not in text

    line = (tmp_path / "intname.json").read_text(encoding="utf-8").strip().splitlines()[-1]
    record = json.loads(line)
    assert record["levelname"] == "DEBUG"
    assert record["name"] == "intname.test"


def test_structured_disabled(tmp_path):
    setup_logging(log_file="plain.log", log_dir=str(tmp_path), enable_structured=False)
    get_logger("intname.test").warning("sin json")
    assert (tmp_path / "plain.log").exists()
    assert not (tmp_path / "plain.json").exists()


def test_setup_from_env_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("INTNAME_LOG_LEVEL", "warning")
    monkeypatch.setenv("INTNAME_LOG_FILE", "conv.log")
    monkeypatch.setenv("INTNAME_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("INTNAME_LOG_STRUCTURED", "false")
    monkeypatch.setenv("INTNAME_LOG_BACKUP_COUNT", "2")

    setup_logging_from_settings(Settings(_env_file=None))

    package_logger = logging.getLogger("intname")
    assert package_logger.level == logging.WARNING
    rotating = [h for h in package_logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(rotating) == 1
    assert rotating[0].baseFilename == str(tmp_path / "logs" / "conv.log")
    assert rotating[0].backupCount == 2
    assert not (tmp_path / "logs" / "conv.json").exists()


def test_setup_from_module_settings(monkeypatch, tmp_path):
    import intname.config

    monkeypatch.setattr(intname.config, "settings", Settings(_env_file=None, LOG_DIR=str(tmp_path)))
    setup_logging_from_settings()

    handlers = logging.getLogger("intname").handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.handlers.RotatingFileHandler)
