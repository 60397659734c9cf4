"""
Utils — утилиты раннера

Модули:
- file_ops: Работа с файлами
- cli: Форматирование CLI вывода
"""

from .file_ops import ensure_dir, write_blocking
from .cli import print_section, print_kv, format_duration, print_sample_result

__all__ = [
    # File operations
    "ensure_dir",
    "write_blocking",
    # CLI
    "print_section",
    "print_kv",
    "format_duration",
    "print_sample_result",
]
