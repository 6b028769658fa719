from .base import Capability, InvocationResult
from .capabilities import CapabilityMap, probe_capabilities
from .dynamic import (
    clear_type_registry,
    instantiate,
    invoke,
    register_type,
    require_type,
    resolve_type,
    selector_to_attribute,
    supports,
    unregister_type,
)

__all__ = [
    "Capability",
    "CapabilityMap",
    "InvocationResult",
    "clear_type_registry",
    "instantiate",
    "invoke",
    "probe_capabilities",
    "register_type",
    "require_type",
    "resolve_type",
    "selector_to_attribute",
    "supports",
    "unregister_type",
]
