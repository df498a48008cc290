"""Declaration of menu components.

A :class:`ComponentRegistry` is the source of the descriptors the resolver
works on. Components are declared with class decorators, and everything the
resolver needs (constructors, their dependency types, the classification)
is read once, when the decorator runs.

Example:
    >>> registry = ComponentRegistry()
    >>>
    >>> @registry.injectable()
    ... class Greeter:
    ...     def greet(self) -> str:
    ...         return "Hello"
    >>>
    >>> @registry.level(home=True)
    ... class Main(MenuLevel):
    ...     label = "Main"
    ...
    ...     def __init__(self, greeter: Greeter):
    ...         self.greeter = greeter
    ...
    ...     @action("Greet", order=1)
    ...     def greet(self):
    ...         print(self.greeter.greet())
    >>>
    >>> registry.quit_action()(ExitAction)
"""

import inspect
from typing import Any, Callable, Optional, get_type_hints

from easymenu.domain import ComponentDescriptor, ComponentKind, Constructor
from easymenu.errors import DescriptorError
from easymenu.levels import MenuLevel, MenuOption, QuitAction

__all__ = ["ComponentRegistry", "constructor", "describe"]

CONSTRUCTOR_METADATA = "__menu_constructor__"

_REQUIRED_BASES = {
    ComponentKind.LEVEL: MenuLevel,
    ComponentKind.OPTION: MenuOption,
    ComponentKind.QUIT_ACTION: QuitAction,
}


def constructor(func: Callable) -> Callable:
    """Mark a classmethod as an alternative constructor.

    Alternative constructors are tried after ``__init__``, in the order they
    appear in the class body. Apply it beneath ``@classmethod``::

        @classmethod
        @constructor
        def in_memory(cls) -> "Store":
            return cls(InMemoryBackend())
    """
    setattr(func, CONSTRUCTOR_METADATA, True)
    return func


class ComponentRegistry:
    """Registry of component descriptors, in registration order."""

    def __init__(self):
        self._descriptors: list[ComponentDescriptor] = []

    def register(self, descriptor: ComponentDescriptor) -> None:
        """Register a descriptor explicitly.

        Raises:
            DescriptorError: If a descriptor for the same type is already registered.
        """
        if any(d.component_type is descriptor.component_type for d in self._descriptors):
            raise DescriptorError(f"{descriptor.name} is already registered")
        self._descriptors.append(descriptor)

    def descriptors(self) -> list[ComponentDescriptor]:
        return list(self._descriptors)

    def injectable(self) -> Callable:
        """Decorator declaring a dependency-only component.

        Functions are accepted as well as classes; a function provides its
        annotated return type.
        """

        def decorator(obj):
            if inspect.isfunction(obj):
                self.register(_describe_function(obj))
            else:
                self.register(describe(obj))
            return obj

        return decorator

    def level(self, home: bool = False) -> Callable:
        """Decorator declaring a :class:`~easymenu.levels.MenuLevel` subclass.

        Args:
            home: Whether this is the level shown at startup.
        """

        def decorator(cls):
            self.register(describe(cls, ComponentKind.LEVEL, is_home=home))
            return cls

        return decorator

    def option(self, level: type) -> Callable:
        """Decorator declaring a :class:`~easymenu.levels.MenuOption` shown on ``level``."""

        def decorator(cls):
            self.register(describe(cls, ComponentKind.OPTION, level=level))
            return cls

        return decorator

    def quit_action(self) -> Callable:
        """Decorator declaring the :class:`~easymenu.levels.QuitAction`."""

        def decorator(cls):
            self.register(describe(cls, ComponentKind.QUIT_ACTION))
            return cls

        return decorator


def describe(
    cls: Any,
    kind: ComponentKind = ComponentKind.INJECTABLE,
    is_home: bool = False,
    level: Optional[type] = None,
) -> ComponentDescriptor:
    """Build the descriptor of a class.

    Raises:
        DescriptorError: If ``cls`` is not a class, does not derive from the base
            class its kind requires, or has an unannotated constructor parameter.
    """
    if not inspect.isclass(cls):
        raise DescriptorError(f"{cls} is not a class")

    required_base = _REQUIRED_BASES.get(kind)
    if required_base is not None and not issubclass(cls, required_base):
        raise DescriptorError(
            f"{cls.__qualname__} is declared as a {kind.value} "
            f"but does not derive from {required_base.__name__}"
        )
    if is_home and kind is not ComponentKind.LEVEL:
        raise DescriptorError(f"{cls.__qualname__} is not a level and cannot be home")

    return ComponentDescriptor(cls, _class_constructors(cls), kind, is_home, level)


def _describe_function(func: Callable) -> ComponentDescriptor:
    provided_type = _type_hints(func).get("return")
    if not inspect.isclass(provided_type):
        raise DescriptorError(
            f"Function {func.__name__} is registered as injectable "
            "but does not have a class as its return annotation"
        )
    return ComponentDescriptor(
        provided_type, (Constructor(func.__name__, func, _get_dependencies(func)),)
    )


def _class_constructors(cls: type) -> tuple[Constructor, ...]:
    constructors = [Constructor("__init__", cls, _init_dependencies(cls))]

    for name, value in vars(cls).items():
        func = getattr(value, "__func__", None)
        if isinstance(value, classmethod) and getattr(func, CONSTRUCTOR_METADATA, False):
            # the bound classmethod supplies cls
            constructors.append(
                Constructor(name, getattr(cls, name), _get_dependencies(func, skip_first=True))
            )

    return tuple(constructors)


def _init_dependencies(cls: type) -> tuple[type, ...]:
    if cls.__init__ is object.__init__:
        return ()
    return _get_dependencies(cls.__init__, skip_first=True)


def _get_dependencies(func: Callable, skip_first: bool = False) -> tuple[type, ...]:
    """Extract dependency types from a callable's parameter annotations.

    Dependencies are passed positionally, so collection stops at the first
    unannotated parameter with a default. Variadic parameters and keyword-only
    parameters with a default are ignored.

    Raises:
        DescriptorError: If a parameter without a default is not annotated or is
            keyword-only.
    """
    parameters = list(inspect.signature(func).parameters.values())
    if skip_first:
        parameters = parameters[1:]
    hints = _type_hints(func)

    dependencies = []
    for parameter in parameters:
        has_default = parameter.default is not parameter.empty
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue
        if parameter.kind is parameter.KEYWORD_ONLY:
            if has_default:
                continue
            raise DescriptorError(
                "Dependency <%s> of <%s> is keyword-only" % (parameter.name, func.__qualname__)
            )
        annotation = hints.get(parameter.name)
        if annotation is None:
            if has_default:
                break
            raise DescriptorError(
                "Dependency <%s> of <%s> is not annotated" % (parameter.name, func.__qualname__)
            )
        dependencies.append(annotation)
    return tuple(dependencies)


def _type_hints(func: Callable) -> dict[str, Any]:
    try:
        return get_type_hints(func)
    except NameError as e:
        raise DescriptorError(
            f"Cannot resolve annotations of {func.__qualname__}: {e}. "
            "Dependencies must be declared before the components that use them."
        ) from e
