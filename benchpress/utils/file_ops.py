"""
file operations - работа с файлами
"""

from pathlib import Path
from typing import Union


def ensure_dir(path: Union[str, Path]) -> Path:
    """
    Создать директорию если не существует

    Args:
        path: Путь к директории

    Returns:
        Path объект
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_blocking(path: Union[str, Path], content: Union[str, bytes]) -> None:
    """
    Записать файл целиком (блокирующий вызов)

    str пишется как UTF-8, bytes — как есть. Файл перезаписывается,
    недостающие родительские папки создаются.

    Raises:
        OSError: Ошибка файловой системы (нет прав, диск заполнен, ...)
        TypeError: content не str и не bytes
    """
    if isinstance(content, str):
        data = content.encode('utf-8')
    elif isinstance(content, (bytes, bytearray, memoryview)):
        data = bytes(content)
    else:
        raise TypeError(f"content должен быть str или bytes, получено {type(content).__name__}")

    path = Path(path)
    ensure_dir(path.parent)

    with open(path, 'wb') as f:
        f.write(data)
