"""
cli utilities - форматирование cli
"""

from typing import Optional

from ..schemas.results import SampleResult


def print_section(title: str, width: int = 60):
    """Вывести заголовок секции"""
    print()
    print("=" * width)
    print(f" {title}")
    print("=" * width)


def print_kv(label: str, value, indent: int = 2):
    """Вывести пару ключ-значение"""
    print(" " * indent + f"{label}: {value}")


def format_duration(seconds: float) -> str:
    """Длительность в удобных единицах: 1.500 s, 12.000 ms, 3.250 us"""
    if seconds >= 1:
        return f"{seconds:.3f} s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f} ms"
    return f"{seconds * 1e6:.3f} us"


def print_sample_result(result: SampleResult, path: Optional[str] = None):
    """Итоги одного сэмпла: параметры, сырые замеры и путь к файлу"""
    print_section(f"Сэмпл {result.sample_id}")
    for key, value in result.description.items():
        print_kv(key, value)
    print_kv("Замеров", result.runs_count)
    print_kv("Микроитераций", result.microiterations)
    print_kv("Замеры", ", ".join(format_duration(d) for d in result.durations))
    if path:
        print_kv("Результат", path)
    print()
