"""
BaseRunner — языконезависимое ядро прогона бенчмарков

Центральный компонент, отвечающий за:
- Сборку реестра возможностей (значения по умолчанию + привязки вызывающего)
- Проверку WRITE_FILE при создании
- Запуск сэмплов и сбор сырых замеров
- Сохранение результата через внедрённую возможность WRITE_FILE

Раннер не знает, в каком окружении работает: всё окружение-зависимое
приходит через привязки.

Использование:
    runner = BaseRunner([bind(Capability.WRITE_FILE, my_writer)])
    result = await runner.sample("sort", execute=lambda: sorted(data))
"""

import inspect
import logging
import time
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional

from ..config.settings import Settings, get_settings
from ..schemas.capabilities import Capability, CapabilityBinding, bind
from ..schemas.results import SampleResult
from .registry import BindingRegistry


logger = logging.getLogger(__name__)

REQUIRED_CAPABILITIES = (Capability.WRITE_FILE,)


def default_bindings(settings: Settings) -> List[CapabilityBinding]:
    """Привязки, которые есть у любого раннера"""
    return [
        bind(Capability.NOW, time.perf_counter),
        bind(Capability.RESULTS_DIR, settings.paths.results_dir),
        bind(Capability.DEFAULT_DESCRIPTION, {}),
        bind(Capability.SAMPLE_DESCRIPTION, {}),
    ]


async def _call(fn: Callable[[], Any]) -> Any:
    """Вызвать функцию, дождавшись результата если она асинхронная"""
    value = fn()
    if inspect.isawaitable(value):
        value = await value
    return value


class BaseRunner:
    """
    Раннер бенчмарков с внедряемыми возможностями

    Атрибуты:
        registry: Неизменяемый реестр привязок

    Example:
        runner = BaseRunner([bind(Capability.WRITE_FILE, writer)])
        result = await runner.sample("fib", execute=lambda: fib(20), sample_count=5)
        print(result.durations)
    """

    def __init__(
        self,
        bindings: Optional[Iterable[CapabilityBinding]] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            bindings: Привязки вызывающего кода, добавляются после значений по умолчанию
            settings: Настройки (если None — из get_settings())

        Raises:
            UnboundCapability: Если после сборки не привязана WRITE_FILE
        """
        self._settings = settings or get_settings()
        self._registry = BindingRegistry(default_bindings(self._settings) + list(bindings or []))
        self._registry.require(*REQUIRED_CAPABILITIES)

        logger.debug(f"Раннер создан: {self._registry!r}")

    @property
    def registry(self) -> BindingRegistry:
        return self._registry

    def resolve(self, identifier: Capability) -> Any:
        return self._registry.resolve(identifier)

    # =========================================================================
    # Публичный API — прогон
    # =========================================================================

    async def sample(
        self,
        id: str,
        execute: Callable[[], Any],
        prepare: Optional[Callable[[], Any]] = None,
        microiterations: Optional[int] = None,
        sample_count: Optional[int] = None,
        bindings: Optional[Iterable[CapabilityBinding]] = None,
    ) -> SampleResult:
        """
        Прогнать сэмпл и сохранить результат

        Args:
            id: Идентификатор сэмпла
            execute: Измеряемая функция (обычная или async)
            prepare: Подготовка перед каждым запуском (не измеряется)
            microiterations: Сколько раз вызвать execute внутри одного замера
            sample_count: Количество замеров
            bindings: Привязки только для этого сэмпла (перекрывают привязки раннера)

        Returns:
            SampleResult с сырыми длительностями

        Raises:
            WriteFailure: Если не удалось сохранить результат
            ValueError: Если sample_count или microiterations меньше 1
        """
        registry = self._registry.extend([bind(Capability.SAMPLE_ID, id)] + list(bindings or []))

        runner_config = self._settings.runner
        count = sample_count if sample_count is not None else runner_config.sample_count
        micro = microiterations if microiterations is not None else runner_config.microiterations
        if count < 1:
            raise ValueError(f"sample_count должен быть >= 1, получено {count}")
        if micro < 1:
            raise ValueError(f"microiterations должен быть >= 1, получено {micro}")

        now = registry.resolve(Capability.NOW)

        logger.info(f"Сэмпл {id}: замеров={count}, микроитераций={micro}")

        durations: List[float] = []
        for _ in range(count):
            if prepare is not None:
                await _call(prepare)

            start = now()
            for _ in range(micro):
                await _call(execute)
            durations.append((now() - start) / micro)

        description = dict(registry.resolve(Capability.DEFAULT_DESCRIPTION))
        description.update(registry.resolve(Capability.SAMPLE_DESCRIPTION))

        result = SampleResult(
            sample_id=registry.resolve(Capability.SAMPLE_ID),
            description=description,
            durations=durations,
            microiterations=micro,
        )

        path = await self.write_results(result, registry)
        logger.info(f"Сэмпл {id} завершён, результат: {path}")

        return result

    async def write_results(
        self,
        result: SampleResult,
        registry: Optional[BindingRegistry] = None,
    ) -> str:
        """
        Сохранить результат через WRITE_FILE

        Returns:
            Путь, переданный в WRITE_FILE
        """
        if registry is None:
            registry = self._registry
        path = self.result_path(result, registry)
        write_file = registry.resolve(Capability.WRITE_FILE)

        await write_file(path, result.to_json())
        return path

    def result_path(self, result: SampleResult, registry: Optional[BindingRegistry] = None) -> str:
        """Путь файла результата в RESULTS_DIR"""
        if registry is None:
            registry = self._registry
        results_dir = Path(registry.resolve(Capability.RESULTS_DIR))
        return str(results_dir / f"{result.file_stem}.json")
