"""Domain models used throughout the framework."""

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Optional


class ComponentKind(enum.Enum):
    """How a component takes part in the navigation model once instantiated."""

    INJECTABLE = "injectable"
    LEVEL = "level"
    OPTION = "option"
    QUIT_ACTION = "quit_action"


@dataclass(frozen=True)
class Constructor:
    """One way of instantiating a component.

    Attributes:
        name: Human readable name, e.g. ``__init__`` or the factory classmethod name.
        factory: Callable invoked with the resolved dependencies as positional arguments.
        dependencies: Type identities of the arguments, in call order.
    """

    name: str
    factory: Callable[..., Any]
    dependencies: tuple[type, ...] = ()


@dataclass(frozen=True)
class ComponentDescriptor:
    """Static description of a discoverable component type.

    Constructors are tried in the order given here; the first one whose
    dependencies are all available is used.

    Attributes:
        component_type: The type identity the resolved instance is keyed by.
        constructors: Candidate constructors in preference order.
        kind: Classification of the component.
        is_home: Whether a level is the home level. Only meaningful for levels.
        level: For options, the type of the level the option belongs to.
    """

    component_type: type
    constructors: tuple[Constructor, ...]
    kind: ComponentKind = ComponentKind.INJECTABLE
    is_home: bool = False
    level: Optional[type] = None

    @property
    def name(self) -> str:
        return self.component_type.__qualname__

    @property
    def is_level(self) -> bool:
        return self.kind is ComponentKind.LEVEL

    @property
    def is_option(self) -> bool:
        return self.kind is ComponentKind.OPTION

    @property
    def is_quit_action(self) -> bool:
        return self.kind is ComponentKind.QUIT_ACTION

    @property
    def is_injectable(self) -> bool:
        return self.kind is ComponentKind.INJECTABLE


@dataclass(frozen=True)
class InstantiatedComponent:
    """
    Represents a resolved and instantiated component.

    Attributes:
        descriptor: The descriptor the component was built from.
        component: The instantiated component object.
        constructor: The constructor that was selected.
        dependencies: The instances passed to the constructor, in call order.
    """

    descriptor: ComponentDescriptor
    component: Any
    constructor: Constructor
    dependencies: list[Any] = field(default_factory=list)

    @property
    def component_type(self) -> type:
        return self.descriptor.component_type
