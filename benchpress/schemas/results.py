"""
Result Schemas - схемы для результатов прогона

Отвечает за:
- Результат одного сэмпла (SampleResult)
- Сериализацию в JSON для сохранения через WRITE_FILE
"""

from typing import Any, Dict, List
from datetime import datetime
from pydantic import BaseModel, Field, computed_field


class SampleResult(BaseModel):
    """
    Результат одного сэмпла

    Один сэмпл = N запусков измеряемой функции с сырыми длительностями.
    Статистика здесь не считается.
    """
    sample_id: str = Field(..., min_length=1)
    description: Dict[str, Any] = Field(default_factory=dict)

    # Сырые замеры (секунды на один запуск execute)
    durations: List[float] = Field(default_factory=list)
    microiterations: int = Field(default=1, ge=1)

    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())

    @computed_field
    @property
    def runs_count(self) -> int:
        """Количество запусков"""
        return len(self.durations)

    @property
    def file_stem(self) -> str:
        """Имя файла результата без расширения"""
        stamp = self.timestamp.replace(":", "").replace("-", "").replace(".", "_")
        return f"{self.sample_id}_{stamp}"

    def to_json(self) -> str:
        """Сериализовать для записи на диск"""
        return self.model_dump_json(indent=2)
