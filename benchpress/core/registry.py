"""
BindingRegistry — реестр привязок возможностей

Разрешает возможность по идентификатору. При повторной регистрации
одного идентификатора побеждает последняя привязка.

Реестр неизменяем после создания: extend() возвращает новый реестр.

Использование:
    registry = BindingRegistry([bind(Capability.WRITE_FILE, writer)])
    write_file = registry.resolve(Capability.WRITE_FILE)
"""

import logging
from types import MappingProxyType
from typing import Any, Iterable, List, Optional

from ..schemas.capabilities import Capability, CapabilityBinding
from .errors import UnboundCapability


logger = logging.getLogger(__name__)


class BindingRegistry:
    """
    Неизменяемый реестр привязок

    Атрибуты:
        bindings: Исходный упорядоченный список привязок
    """

    def __init__(self, bindings: Optional[Iterable[CapabilityBinding]] = None):
        self._bindings = tuple(bindings or ())

        resolved = {}
        for binding in self._bindings:
            if binding.identifier in resolved:
                logger.debug(f"Привязка '{binding.identifier}' переопределена")
            resolved[binding.identifier] = binding.implementation

        self._resolved = MappingProxyType(resolved)

    @property
    def bindings(self) -> tuple:
        return self._bindings

    def resolve(self, identifier: Capability) -> Any:
        """
        Получить реализацию возможности

        Raises:
            UnboundCapability: Если для идентификатора ничего не зарегистрировано
        """
        try:
            return self._resolved[Capability(identifier)]
        except (KeyError, ValueError):
            raise UnboundCapability(identifier) from None

    def has(self, identifier: Capability) -> bool:
        try:
            return Capability(identifier) in self._resolved
        except ValueError:
            return False

    def require(self, *identifiers: Capability) -> None:
        """Проверить, что все возможности привязаны"""
        for identifier in identifiers:
            if not self.has(identifier):
                raise UnboundCapability(identifier)

    def extend(self, bindings: Optional[Iterable[CapabilityBinding]]) -> "BindingRegistry":
        """Новый реестр с дополнительными привязками поверх текущих"""
        return BindingRegistry(self._bindings + tuple(bindings or ()))

    def identifiers(self) -> List[Capability]:
        return list(self._resolved)

    def __contains__(self, identifier) -> bool:
        return self.has(identifier)

    def __len__(self) -> int:
        return len(self._resolved)

    def __repr__(self) -> str:
        names = ", ".join(str(i) for i in self._resolved)
        return f"BindingRegistry([{names}])"
