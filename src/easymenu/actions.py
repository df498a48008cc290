"""Selectable actions.

Everything the executor can display implements the :class:`Action` protocol:
a ``label``, an ``order`` used for sorting and a zero-argument ``run``.
Levels declare their own actions either by marking methods with
:func:`action` or by declaring :func:`navigation` class attributes.

Example:
    >>> class Settings(MenuLevel):
    ...     label = "Settings"
    ...     home = navigation("Home", "Main", order=9)
    ...
    ...     @action("Reset", order=1)
    ...     def reset(self):
    ...         ...
"""

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, Union

if TYPE_CHECKING:
    from easymenu.context import NavigationContext

__all__ = [
    "Action",
    "ActionSpec",
    "ActionDescriptor",
    "NavigationAction",
    "NavigationDeclaration",
    "action",
    "navigation",
    "action_spec_of",
    "takes_no_arguments",
]

ACTION_METADATA = "__menu_action__"

LevelTarget = Union[type, str]
"""A navigation target: a level type, or the name of a level type for forward references."""


class Action(Protocol):
    label: str
    order: int

    def run(self) -> None: ...


@dataclass(frozen=True)
class ActionSpec:
    """Metadata attached to a level method by :func:`action`."""

    label: str
    order: int = 0


@dataclass(frozen=True)
class ActionDescriptor:
    """A level's own action, bound to the level instance.

    Attributes:
        label: Text shown to the user.
        order: Sort key; lower values are displayed first.
        callback: Zero-argument callable performing the action.
        name: Attribute name the action was declared under.
    """

    label: str
    order: int
    callback: Callable[[], Any] = field(compare=False)
    name: str = ""

    def run(self) -> None:
        self.callback()


@dataclass(frozen=True)
class NavigationDeclaration:
    """Class-level declaration of a navigation action, see :func:`navigation`."""

    label: str
    target: LevelTarget
    order: int = 0

    def bind(self, context: "NavigationContext") -> "NavigationAction":
        return NavigationAction(self.label, self.target, context, self.order)


class NavigationAction:
    """An action that makes another level current."""

    def __init__(
        self,
        label: str,
        target: LevelTarget,
        context: "NavigationContext",
        order: int = 0,
    ):
        self.label = label
        self.order = order
        self._target = target
        self._context = context

    @property
    def target(self) -> LevelTarget:
        return self._target

    def run(self) -> None:
        target = self._target
        if isinstance(target, str):
            target = self._context.level_type(target)
        self._context.navigate(target)

    def __repr__(self) -> str:
        return f"NavigationAction({self.label!r}, {self._target!r}, order={self.order})"


def action(label: str, order: int = 0) -> Callable:
    """Mark a level method as a selectable action.

    Args:
        label: Text displayed in the menu.
        order: Display order; lower values come first, ties keep declaration order.

    Returns:
        A decorator returning the method unchanged apart from its metadata.
    """

    def decorator(func: Callable) -> Callable:
        setattr(func, ACTION_METADATA, ActionSpec(label, order))
        return func

    return decorator


def navigation(label: str, target: LevelTarget, order: int = 0) -> NavigationDeclaration:
    """Declare a navigation action as a class attribute of a level.

    The target may be given by name when the level is declared further down
    the module; names are matched against the registered levels when the
    action runs.
    """
    return NavigationDeclaration(label, target, order)


def action_spec_of(obj: Any) -> Optional[ActionSpec]:
    return getattr(obj, ACTION_METADATA, None)


def takes_no_arguments(func: Callable) -> bool:
    """Whether ``func`` can be called without arguments and declares none."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    return len(signature.parameters) == 0
