"""
Config module — централизованная конфигурация раннера

Экспортирует:
- Settings: класс настроек
- get_settings(): получить singleton настроек
- reload_settings(): перезагрузить настройки
- setup_logging(): настроить логирование согласно конфигу
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from .settings import LoggingConfig, Settings, get_settings, reload_settings


# Метка на обработчиках, которые ставит benchpress: повторный setup_logging
# снимает только их, чужие обработчики корневого логгера остаются
HANDLER_MARK = "_benchpress_handler"


def _level(name: str, default: int) -> int:
    return getattr(logging, name, default)


def _console_handler(log_config: LoggingConfig) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_level(log_config.console.level, logging.INFO))
    return handler


def _file_handler(settings: Settings) -> logging.Handler:
    """Файловый обработчик; с ротацией если она включена"""
    file_config = settings.logging.file
    log_file_path = settings.get_log_file_path()
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    if file_config.rotation.enabled:
        handler = RotatingFileHandler(
            filename=str(log_file_path),
            maxBytes=file_config.rotation.max_size_mb * 1024 * 1024,
            backupCount=file_config.rotation.backup_count,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(filename=str(log_file_path), encoding="utf-8")

    handler.setLevel(_level(file_config.level, logging.DEBUG))
    return handler


def _remove_own_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if getattr(handler, HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()


def setup_logging(settings: Optional[Settings] = None) -> List[logging.Handler]:
    """
    Настроить логирование согласно settings.yaml

    Консольный вывод и файл (с ротацией) включаются по конфигу.
    Вызов можно повторять: обработчики предыдущего вызова заменяются.

    Args:
        settings: Объект настроек (если None — загружается автоматически)

    Returns:
        Список установленных обработчиков
    """
    if settings is None:
        settings = get_settings()

    log_config = settings.logging
    root_logger = logging.getLogger()
    root_logger.setLevel(_level(log_config.level, logging.INFO))
    _remove_own_handlers(root_logger)

    handlers = []
    if log_config.console.enabled:
        handlers.append(_console_handler(log_config))
    if log_config.file.enabled:
        handlers.append(_file_handler(settings))

    formatter = logging.Formatter(fmt=log_config.format, datefmt=log_config.date_format)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, HANDLER_MARK, True)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Логирование настроено: level={log_config.level}, обработчиков={len(handlers)}"
    )
    return handlers


__all__ = ["Settings", "get_settings", "reload_settings", "setup_logging"]
