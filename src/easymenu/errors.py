"""Exceptions raised while building and running a menu.

Errors deriving from :class:`ConfigurationError` are fatal: they are raised
while the menu is being assembled and abort startup before the interactive
loop begins. :class:`NavigationError` is recoverable and is normally raised
from inside an action body.
"""

from typing import Any, Iterable, Mapping, Optional, Union

__all__ = [
    "MenuError",
    "ConfigurationError",
    "DescriptorError",
    "UnresolvedDependencyError",
    "MultipleHomeError",
    "MultipleQuitError",
    "MissingHomeError",
    "MissingQuitActionError",
    "InvalidActionSignatureError",
    "NavigationError",
    "UnknownLevelError",
]


def _type_name(obj: Any) -> str:
    if isinstance(obj, str):
        return obj
    cls = obj if isinstance(obj, type) else type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


class MenuError(Exception):
    """Base class for all menu errors."""

    pass


class ConfigurationError(MenuError):
    """Raised when the menu cannot be assembled."""

    pass


class DescriptorError(ConfigurationError):
    """Raised when a component is declared incorrectly."""

    pass


class UnresolvedDependencyError(ConfigurationError):
    """Raised when the resolver stops making progress with components still pending."""

    def __init__(
        self,
        unresolved: Iterable[Any],
        failures: Optional[Mapping[type, BaseException]] = None,
    ):
        self.unresolved = list(unresolved)
        self.failures = dict(failures or {})
        names = sorted(_type_name(descriptor.component_type) for descriptor in self.unresolved)
        message = f"Unresolvable dependencies: {names}"
        if self.failures:
            failed = ", ".join(
                f"{_type_name(component_type)} ({error!r})"
                for component_type, error in self.failures.items()
            )
            message += f"; construction failed for {failed}"
        super().__init__(message)


class MultipleHomeError(ConfigurationError):
    def __init__(self, current: Any, incoming: Any):
        self.current = current
        self.incoming = incoming
        super().__init__(
            f"Multiple home levels detected! {_type_name(current)}, {_type_name(incoming)}"
        )


class MultipleQuitError(ConfigurationError):
    def __init__(self, current: Any, incoming: Any):
        self.current = current
        self.incoming = incoming
        super().__init__(
            f"Multiple quit actions detected! {_type_name(current)}, {_type_name(incoming)}"
        )


class MissingHomeError(ConfigurationError):
    def __init__(self):
        super().__init__("No level is set as home for the application")


class MissingQuitActionError(ConfigurationError):
    def __init__(self):
        super().__init__("No quit action is configured for the application")


class InvalidActionSignatureError(ConfigurationError):
    """Raised when a level declares an action that takes arguments."""

    def __init__(self, level: Any, action_name: str):
        self.level = level
        self.action_name = action_name
        super().__init__(
            f"The action {_type_name(level)}.{action_name} has arguments. "
            "Methods marked with @action cannot take any arguments!"
        )


class NavigationError(MenuError):
    """Raised when a navigation request cannot be honoured."""

    pass


class UnknownLevelError(NavigationError):
    def __init__(self, target: Union[type, str]):
        self.target = target
        super().__init__(
            f"Level {_type_name(target)} is not present in the registered levels"
        )
