"""
Data Schemas - схемы данных раннера

Экспортирует все схемы из подмодулей:
- capabilities: Capability, CapabilityBinding, bind
- results: SampleResult
"""

from .capabilities import (
    Capability,
    CapabilityBinding,
    bind,
)

from .results import (
    SampleResult,
)

__all__ = [
    # Capabilities
    "Capability",
    "CapabilityBinding",
    "bind",
    # Results
    "SampleResult",
]
