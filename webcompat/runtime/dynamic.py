"""
Run-time type resolution and name-based dispatch.

Operations are named by Objective-C style selectors. A selector maps to a
Python attribute the way PyObjC bridges them: every ``:`` becomes ``_``, so
``loadHTMLString:baseURL:`` is looked up as ``loadHTMLString_baseURL_``.
"""

from __future__ import annotations

import importlib
import inspect
import threading
from typing import Any, Dict, Optional

from ..errors import InvocationArgumentError, InvocationFailure, Unavailable
from ..utils.logging import get_logger
from .base import InvocationResult

logger = get_logger(__name__)

_type_registry: Dict[str, Any] = {}
_registry_lock = threading.Lock()


def selector_to_attribute(selector: str) -> str:
    return selector.replace(':', '_')


def selector_arity(selector: str) -> int:
    return selector.count(':')


# Type registry

def register_type(name: str, cls: Any) -> None:
    """Make ``cls`` resolvable as ``name`` for the life of the process"""
    with _registry_lock:
        _type_registry[name] = cls
    logger.debug(f"Registered type '{name}' -> {cls!r}")


def unregister_type(name: str) -> None:
    with _registry_lock:
        _type_registry.pop(name, None)


def clear_type_registry() -> None:
    with _registry_lock:
        _type_registry.clear()


def _import_attribute(path: str) -> Optional[Any]:
    if ':' in path:
        module_name, _, attr_path = path.partition(':')
    else:
        module_name, _, attr_path = path.rpartition('.')
    if not module_name or not attr_path:
        return None

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        logger.debug(f"Module '{module_name}' not importable: {e}")
        return None

    target: Any = module
    for part in attr_path.split('.'):
        target = getattr(target, part, None)
        if target is None:
            return None
    return target


def _lookup_objc_class(name: str) -> Optional[Any]:
    try:
        objc = importlib.import_module('objc')
    except ImportError:
        logger.debug(f"PyObjC not importable; cannot look up class '{name}'")
        return None

    try:
        return objc.lookUpClass(name)
    except objc.nosuchclass_error:
        return None


def resolve_type(name: Optional[str]) -> Optional[Any]:
    """Resolve a type by name, or return None when it does not exist here.

    Registered names win. Names containing ``:`` or ``.`` are import paths.
    Bare names are looked up in the Objective-C runtime.
    """
    if not name:
        return None

    with _registry_lock:
        registered = _type_registry.get(name)
    if registered is not None:
        return registered

    if ':' in name or '.' in name:
        resolved = _import_attribute(name)
    else:
        resolved = _lookup_objc_class(name)

    if resolved is None:
        logger.debug(f"Type '{name}' could not be resolved")
    return resolved


def require_type(name: str) -> Any:
    """Like resolve_type, but raise Unavailable instead of returning None"""
    resolved = resolve_type(name)
    if resolved is None:
        raise Unavailable(name, "type not found at runtime")
    return resolved


def instantiate(cls: Any, *args: Any) -> Optional[Any]:
    if cls is None:
        return None
    try:
        return cls(*args)
    except Exception as e:
        logger.warning(f"Could not instantiate {getattr(cls, '__name__', cls)}: {e}")
        return None


# Dispatch

_MISSING = object()


def _lookup(instance: Any, selector: str) -> Any:
    if instance is None:
        return _MISSING
    return getattr(instance, selector_to_attribute(selector), _MISSING)


def supports(instance: Any, selector: str) -> bool:
    try:
        return _lookup(instance, selector) is not _MISSING
    except Exception as e:
        logger.debug(f"Probing '{selector}' raised: {e}")
        return False


def _check_arguments(selector: str, target: Any, args: tuple) -> None:
    expected = selector_arity(selector)
    if expected != len(args):
        raise InvocationArgumentError(
            selector, TypeError(f"expects {expected} argument(s), got {len(args)}"))

    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # Bridged and builtin callables may not expose a signature
        return

    try:
        signature.bind(*args)
    except TypeError as e:
        raise InvocationArgumentError(selector, e) from e


def invoke(instance: Any, selector: str, *args: Any) -> InvocationResult:
    """Call ``selector`` on ``instance`` by name.

    Returns an ``unsupported`` result when the selector is missing and an
    ``error`` result when the call raises. Raises InvocationArgumentError only
    when a supported selector is given the wrong arguments.
    """
    try:
        target = _lookup(instance, selector)
    except Exception as e:
        logger.warning(f"Looking up '{selector}' failed: {e}")
        return InvocationResult.failed(selector, InvocationFailure(selector, e))

    if target is _MISSING:
        return InvocationResult.not_supported(selector)

    if not callable(target):
        # Plain attribute, read as a property
        if args:
            raise InvocationArgumentError(
                selector, TypeError(f"'{selector}' is a property and takes no arguments"))
        return InvocationResult.success(selector, target)

    _check_arguments(selector, target, args)

    try:
        value = target(*args)
    except Exception as e:
        logger.warning(f"Invocation of '{selector}' failed: {e}")
        return InvocationResult.failed(selector, InvocationFailure(selector, e))

    return InvocationResult.success(selector, value)
