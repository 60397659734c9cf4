"""
Host — адаптер окружения хоста

Добавляет к базовому раннеру ровно одну возможность: WRITE_FILE,
реализованную через нативный асинхронный примитив записи хоста.

Примитив хоста использует соглашение error-first callback:
    primitive(path, content, callback) -> None, callback(error | None)

wrap_callback_write() превращает его в корутину:
    await write_file(path, content)  # WriteFailure при ошибке

Использование:
    from benchpress.core import create_host_runner

    runner = create_host_runner()
    await runner.sample("fib", execute=lambda: fib(20))
"""

import asyncio
import logging
from typing import Any, Callable, Iterable, Optional, Union

from ..config.settings import Settings, get_settings
from ..schemas.capabilities import Capability, CapabilityBinding, bind
from ..utils import file_ops
from .errors import WriteFailure
from .runner import BaseRunner


logger = logging.getLogger(__name__)

Content = Union[str, bytes]
Callback = Callable[[Any], None]


def write_file_callback(path: str, content: Content, callback: Callback) -> None:
    """
    Нативный примитив записи хоста

    Запись выполняется в executor'е текущего event loop,
    по завершении вызывается callback(error) — None при успехе.
    """
    loop = asyncio.get_running_loop()
    pending = loop.run_in_executor(None, file_ops.write_blocking, path, content)

    def _on_done(future: asyncio.Future) -> None:
        if future.cancelled():
            callback(asyncio.CancelledError())
        else:
            callback(future.exception())

    pending.add_done_callback(_on_done)


def wrap_callback_write(
    primitive: Callable[[str, Content, Callback], Any],
    timeout: Optional[float] = None,
) -> Callable[[str, Content], Any]:
    """
    Обернуть error-first примитив в асинхронную функцию WRITE_FILE

    Ошибка примитива (в callback или синхронным исключением) становится
    WriteFailure у того, кто ждёт запись. Успех — только после callback(None).

    Args:
        primitive: primitive(path, content, callback)
        timeout: Таймаут ожидания в секундах (None — без таймаута)

    Returns:
        async write_file(path, content) -> None
    """

    async def write_file(path: str, content: Content) -> None:
        path = str(path)
        loop = asyncio.get_running_loop()
        done = loop.create_future()

        def _settle(error: Any) -> None:
            if done.done():
                return
            if error is None:
                done.set_result(None)
                return
            # error-first: ошибкой может быть любое значение, не только исключение
            if not isinstance(error, BaseException):
                error = OSError(error)
            failure = WriteFailure(path, error)
            failure.__cause__ = error
            done.set_exception(failure)

        def _callback(error: Any = None) -> None:
            # примитив может звать callback из чужого потока
            loop.call_soon_threadsafe(_settle, error)

        logger.debug(f"Запись {path}")
        try:
            primitive(path, content, _callback)
        except Exception as err:
            _settle(err)

        try:
            if timeout is None:
                await done
            else:
                await asyncio.wait_for(done, timeout)
        except asyncio.TimeoutError as err:
            logger.error(f"Запись {path} не завершилась за {timeout}с")
            raise WriteFailure(path, err) from err
        except WriteFailure as err:
            logger.error(f"Ошибка записи: {err}")
            raise

        logger.debug(f"Записан {path}")

    write_file.__name__ = "write_file"
    write_file.__qualname__ = f"wrap_callback_write({getattr(primitive, '__name__', 'primitive')})"
    return write_file


host_write_file = wrap_callback_write(write_file_callback)


def create_host_runner(
    bindings: Optional[Iterable[CapabilityBinding]] = None,
    write_timeout: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> BaseRunner:
    """
    Создать раннер для окружения хоста

    WRITE_FILE хоста идёт первым как значение по умолчанию:
    привязка WRITE_FILE из bindings регистрируется позже и побеждает.

    Args:
        bindings: Дополнительные привязки вызывающего кода
        write_timeout: Таймаут записи в секундах (None — из settings.runner.write_timeout)
        settings: Настройки (если None — из get_settings())

    Returns:
        BaseRunner с заполненной возможностью WRITE_FILE
    """
    settings = settings or get_settings()
    if write_timeout is None:
        write_timeout = settings.runner.write_timeout

    write_file = host_write_file
    if write_timeout is not None:
        write_file = wrap_callback_write(write_file_callback, timeout=write_timeout)

    host_bindings = [bind(Capability.WRITE_FILE, write_file)]
    host_bindings.extend(bindings or [])

    return BaseRunner(host_bindings, settings=settings)
