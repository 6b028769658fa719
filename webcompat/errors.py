"""
Error taxonomy for the legacy web engine adapter.

Navigation failures reported by the legacy engine are never wrapped here:
they reach the navigation delegate as the engine's own error objects.
"""


class WebCompatError(Exception):
    """Base class for adapter-internal failures"""


class Unavailable(WebCompatError):
    """A legacy type or selector does not exist on this platform"""

    def __init__(self, name: str, detail: str = ""):
        self.name = name
        message = f"'{name}' is not available on this platform"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvocationFailure(WebCompatError):
    """The target existed but the call itself could not be completed"""

    def __init__(self, selector: str, cause: BaseException = None):
        self.selector = selector
        self.cause = cause
        message = f"Invocation of '{selector}' failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class InvocationArgumentError(InvocationFailure, TypeError):
    """Arguments do not match a selector that is known to be supported"""
