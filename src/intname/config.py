from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path
from pydantic import Field, field_validator

from intname.widths import MAX_MAGNITUDE

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_FILE = PROJECT_ROOT / ".env"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        env_prefix="INTNAME_",
        case_sensitive=True,
        extra="ignore"
    )

    APP_NAME: str = "intname"

    # Configuración de logging
    LOG_LEVEL: str = Field("INFO", description="Nivel de logging: DEBUG, INFO, WARNING, ERROR, CRITICAL")
    LOG_FILE: Optional[str] = Field(None, description="Nombre del archivo de log (None = solo console)")
    LOG_DIR: str = Field("logs", description="Directorio para archivos de log")
    LOG_STRUCTURED: bool = Field(True, description="Habilitar logging estructurado JSON")
    LOG_MAX_BYTES: int = Field(10_485_760, description="Tamaño máximo del archivo de log en bytes (10MB)")
    LOG_BACKUP_COUNT: int = Field(5, description="Número de archivos de backup a mantener")

    # Normalización de texto
    TEXT_NORM_MAX_VALUE: int = Field(10**12, ge=1, le=MAX_MAGNITUDE,
                                     description="Números mayores se dejan en cifras")
    TEXT_NORM_KEEP_HYPHENS: bool = Field(True, description="False: 'forty two' en vez de 'forty-two'")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL inválido: {v}")
        return level

    def get_log_dir(self) -> Path:
        """Obtiene el directorio de logs como Path absoluto."""
        if Path(self.LOG_DIR).is_absolute():
            return Path(self.LOG_DIR)
        return PROJECT_ROOT / self.LOG_DIR


settings = Settings()
