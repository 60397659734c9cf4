"""
Core — ядро раннера

Основные компоненты:
- BindingRegistry: Неизменяемый реестр привязок возможностей
- BaseRunner: Языконезависимый раннер
- create_host_runner: Раннер окружения хоста (WRITE_FILE через файловую систему)
"""

from .errors import BenchpressError, UnboundCapability, WriteFailure
from .registry import BindingRegistry
from .runner import BaseRunner, default_bindings
from .host import (
    create_host_runner,
    host_write_file,
    wrap_callback_write,
    write_file_callback,
)

__all__ = [
    # Ошибки
    "BenchpressError",
    "UnboundCapability",
    "WriteFailure",
    # Основные классы
    "BindingRegistry",
    "BaseRunner",
    "default_bindings",
    # Окружение хоста
    "create_host_runner",
    "host_write_file",
    "wrap_callback_write",
    "write_file_callback",
]
