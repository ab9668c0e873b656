"""
Logging para intname.
La librería solo emite registros; quien la usa decide si llama a setup_logging.
Solo se configura el logger "intname", el root queda en manos de la aplicación.
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional, Dict, Any

PACKAGE_LOGGER = "intname"

_DATEFMT = "%Y-%m-%d %H:%M:%S"


class IntnameFormatter(logging.Formatter):
    """Formatter que antepone el contexto de la conversión si está disponible."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = ""
        if hasattr(record, 'source'):
            prefix += f"[{record.source}] "
        if hasattr(record, 'width'):
            prefix += f"[width:{record.width}] "
        if not prefix:
            return super().format(record)

        # varios handlers formatean el mismo record
        original = record.msg
        record.msg = f"{prefix}{original}"
        try:
            return super().format(record)
        finally:
            record.msg = original


def _rotating_handler(path: Path, level: str, formatter: str, max_bytes: int, backup_count: int) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filename": str(path),
        "maxBytes": max_bytes,
        "backupCount": backup_count,
        "encoding": "utf-8",
    }


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    enable_structured: bool = True,
    max_bytes: int = 10_485_760,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configura el logger del paquete intname.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Nombre del archivo de log (None = solo console)
        log_dir: Directorio para archivos de log
        enable_structured: Si añadir un archivo JSON paralelo (python-json-logger)
        max_bytes: Tamaño máximo del archivo antes de rotación
        backup_count: Número de archivos de backup a mantener
    """
    formatters: Dict[str, Any] = {
        "console": {
            "()": IntnameFormatter,
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": _DATEFMT,
        }
    }
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "console",
            "stream": "ext://sys.stdout",
        }
    }

    if log_file and log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        formatters["file"] = {
            "()": IntnameFormatter,
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            "datefmt": _DATEFMT,
        }
        handlers["file"] = _rotating_handler(log_path / log_file, level, "file", max_bytes, backup_count)

        if enable_structured:
            formatters["json"] = {
                "class": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(funcName)s %(lineno)d %(message)s",
            }
            json_path = log_path / f"{Path(log_file).stem}.json"
            handlers["json_file"] = _rotating_handler(json_path, level, "json", max_bytes, backup_count)

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "loggers": {
            PACKAGE_LOGGER: {
                "level": level,
                "handlers": list(handlers),
                "propagate": False,
            }
        },
    })


def setup_logging_from_settings(config=None) -> None:
    """Aplica setup_logging con un Settings (por defecto intname.config.settings)."""
    if config is None:
        from intname.config import settings as config

    setup_logging(
        level=config.LOG_LEVEL,
        log_file=config.LOG_FILE,
        log_dir=str(config.get_log_dir()),
        enable_structured=config.LOG_STRUCTURED,
        max_bytes=config.LOG_MAX_BYTES,
        backup_count=config.LOG_BACKUP_COUNT
    )


def get_logger(name: str) -> logging.Logger:
    """Logger hijo de "intname" (ej: 'intname.naming')."""
    return logging.getLogger(name)
