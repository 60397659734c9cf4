"""
Errors — таксономия ошибок раннера

- UnboundCapability: запрошенная возможность не привязана (ошибка конфигурации)
- WriteFailure: примитив записи хоста сообщил об ошибке
"""

from typing import Any, Optional


class BenchpressError(Exception):
    """Базовая ошибка раннера"""


class UnboundCapability(BenchpressError, LookupError):
    """Для идентификатора нет зарегистрированной реализации"""

    def __init__(self, identifier: Any):
        self.identifier = identifier
        super().__init__(f"Возможность '{identifier}' не привязана")


class WriteFailure(BenchpressError):
    """
    Запись файла не удалась

    Атрибуты:
        path: Путь, который пытались записать
        cause: Исходная ошибка примитива хоста
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        detail = f"{type(cause).__name__}: {cause}" if cause is not None else "неизвестная ошибка"
        super().__init__(f"Не удалось записать {self.path}: {detail}")
