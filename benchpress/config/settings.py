"""
Settings - централизованная конфигурация раннера

Единая точка доступа ко всем настройкам:
- Загружает configs/settings.yaml
- Переменные окружения с префиксом BENCHPRESS_ (вложенность через "__")
- Валидирует значения через Pydantic

Приоритет: kwargs > env > yaml > defaults

Использование:
    from benchpress.config import get_settings

    settings = get_settings()
    print(settings.runner.sample_count)
    print(settings.paths.results_dir)
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Literal, Tuple, Type

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


SETTINGS_FILE_ENV = "BENCHPRESS_SETTINGS_FILE"


# =============================================================================
# Вложенные модели - точно соответствуют settings.yaml
# =============================================================================

class PathsConfig(BaseModel):
    """Пути проекта"""
    results_dir: str = "results"
    logs_dir: str = "logs"


class RunnerConfig(BaseModel):
    """Параметры прогона по умолчанию"""
    sample_count: int = Field(default=10, ge=1)
    microiterations: int = Field(default=1, ge=1)
    # None — ждать запись без ограничения
    write_timeout: Optional[float] = Field(default=None, gt=0)


class LoggingConsoleConfig(BaseModel):
    """Настройки консольного логирования"""
    enabled: bool = True
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class LoggingRotationConfig(BaseModel):
    """Настройки ротации логов"""
    enabled: bool = True
    max_size_mb: int = 10
    backup_count: int = 5


class LoggingFileConfig(BaseModel):
    """Настройки файлового логирования"""
    enabled: bool = False
    path: str = "benchpress.log"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"
    rotation: LoggingRotationConfig = Field(default_factory=LoggingRotationConfig)


class LoggingConfig(BaseModel):
    """Настройки логирования"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: str = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console: LoggingConsoleConfig = Field(default_factory=LoggingConsoleConfig)
    file: LoggingFileConfig = Field(default_factory=LoggingFileConfig)


def find_settings_file() -> Optional[Path]:
    """Найти settings.yaml: переменная окружения, затем configs/ рядом и в корне проекта"""
    explicit = os.getenv(SETTINGS_FILE_ENV)
    if explicit:
        return Path(explicit)

    possible_paths = [
        Path("configs/settings.yaml"),
        Path(__file__).parent.parent.parent / "configs" / "settings.yaml",
    ]
    for path in possible_paths:
        if path.exists():
            return path
    return None


# =============================================================================
# Главный класс настроек
# =============================================================================

class Settings(BaseSettings):
    """
    Централизованные настройки раннера

    Загружает:
    1. Дефолтные значения из класса
    2. Значения из configs/settings.yaml
    3. Переменные окружения BENCHPRESS_*
    """

    model_config = SettingsConfigDict(
        env_prefix="BENCHPRESS_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # YAML ниже env: переменные окружения перекрывают файл
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=find_settings_file(),
            yaml_file_encoding="utf-8",
        )
        return init_settings, env_settings, dotenv_settings, yaml_settings, file_secret_settings

    def get_log_file_path(self) -> Path:
        """Полный путь к файлу логов"""
        return Path(self.paths.logs_dir) / self.logging.file.path


# =============================================================================
# Singleton и доступ к настройкам
# =============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Получить экземпляр настроек (singleton)

    Использование:
        settings = get_settings()
        print(settings.paths.results_dir)
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Перезагрузить настройки (очистить кеш)

    Использовать при изменении конфигов в runtime
    """
    get_settings.cache_clear()
    return get_settings()
