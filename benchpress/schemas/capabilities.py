"""
Capability Schemas — идентификаторы возможностей окружения и их привязки

Отвечает за:
- Стабильные символьные ключи возможностей (WRITE_FILE и др.)
- Привязку ключа к конкретной реализации (CapabilityBinding)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Capability(str, Enum):
    """
    Символьные идентификаторы возможностей, которые внедряются в раннер

    WRITE_FILE — асинхронная запись файла: async (path, content) -> None
    NOW — часы для замера времени: () -> float (секунды)
    RESULTS_DIR — папка для сохранения результатов
    SAMPLE_ID, SAMPLE_DESCRIPTION, DEFAULT_DESCRIPTION — описание прогона
    """
    WRITE_FILE = "write_file"
    NOW = "now"
    RESULTS_DIR = "results_dir"
    SAMPLE_ID = "sample_id"
    SAMPLE_DESCRIPTION = "sample_description"
    DEFAULT_DESCRIPTION = "default_description"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CapabilityBinding:
    """Пара идентификатор -> реализация"""
    identifier: Capability
    implementation: Any


def bind(identifier: Capability, implementation: Any) -> CapabilityBinding:
    """
    Создать привязку возможности

    Example:
        bind(Capability.WRITE_FILE, my_async_writer)
    """
    return CapabilityBinding(identifier=Capability(identifier), implementation=implementation)
