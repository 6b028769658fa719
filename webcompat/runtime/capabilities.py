from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Set

from .base import Capability
from .dynamic import selector_to_attribute, supports


class CapabilityMap:
    """Which selectors a dynamically resolved target actually answers."""

    def __init__(self, target_name: str, capabilities: Optional[Dict[str, Capability]] = None):
        self.target_name = target_name
        self.capabilities = capabilities or {}

    @classmethod
    def probe(cls, instance: Any, selectors: Iterable[str],
              target_name: Optional[str] = None) -> "CapabilityMap":
        """Probe ``instance`` for each selector, one Capability per selector."""
        name = target_name or type(instance).__name__
        capabilities = {}
        for selector in selectors:
            attribute = selector_to_attribute(selector)
            if supports(instance, selector):
                capabilities[selector] = Capability(selector, True, f"Bound to {name}.{attribute}")
            else:
                capabilities[selector] = Capability(selector, False, f"{name} has no {attribute}")
        return cls(name, capabilities)

    @classmethod
    def unavailable(cls, target_name: str, selectors: Iterable[str],
                    reason: str = "Type not found at runtime") -> "CapabilityMap":
        """Map where nothing is available, used when the target never resolved."""
        return cls(target_name, {s: Capability(s, False, reason) for s in selectors})

    def get_capability(self, name: str) -> Capability:
        return self.capabilities.get(name, Capability(name, False, "Unknown capability"))

    def is_available(self, name: str) -> bool:
        return self.get_capability(name).available

    def get_available_capabilities(self) -> Set[str]:
        return {name for name, cap in self.capabilities.items() if cap.available}

    def get_unavailable_capabilities(self) -> Set[str]:
        return {name for name, cap in self.capabilities.items() if not cap.available}

    def as_dict(self) -> Dict[str, Any]:
        """Plain-data view for reports and the CLI"""
        return {
            "target": self.target_name,
            "capabilities": {
                name: {"available": cap.available, "notes": cap.notes}
                for name, cap in sorted(self.capabilities.items())
            },
        }


def probe_capabilities(instance: Any, selectors: Iterable[str],
                       target_name: Optional[str] = None) -> CapabilityMap:
    """Factory function mirroring CapabilityMap.probe"""
    return CapabilityMap.probe(instance, selectors, target_name)
