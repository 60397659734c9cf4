# benchpress
# Раннер бенчмарков с внедряемыми возможностями окружения

from .schemas.capabilities import Capability, CapabilityBinding, bind
from .schemas.results import SampleResult
from .core.errors import BenchpressError, UnboundCapability, WriteFailure
from .core.registry import BindingRegistry
from .core.runner import BaseRunner
from .core.host import create_host_runner, host_write_file, wrap_callback_write

__all__ = [
    # Schemas
    "Capability",
    "CapabilityBinding",
    "bind",
    "SampleResult",
    # Errors
    "BenchpressError",
    "UnboundCapability",
    "WriteFailure",
    # Core
    "BindingRegistry",
    "BaseRunner",
    "create_host_runner",
    "host_write_file",
    "wrap_callback_write",
]
