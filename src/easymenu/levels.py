"""Base classes for the components that make up a menu."""

from typing import TYPE_CHECKING, Any, Optional

from easymenu.actions import (
    Action,
    ActionDescriptor,
    LevelTarget,
    NavigationAction,
    NavigationDeclaration,
    action_spec_of,
    takes_no_arguments,
)
from easymenu.errors import NavigationError

if TYPE_CHECKING:
    from easymenu.context import NavigationContext

__all__ = ["MenuLevel", "MenuOption", "QuitAction", "ExitAction"]


class MenuLevel:
    """A navigable screen.

    Subclasses set ``label`` (an empty label suppresses the header) and declare
    actions with :func:`~easymenu.actions.action` methods or
    :func:`~easymenu.actions.navigation` attributes. Declarations are collected
    once, when the subclass is created, in definition order; a subclass
    inherits its parents' declarations and may override them by name.

    Attributes:
        label: Header shown above the actions.
        back: Optional level to return to; adds a "back" entry ahead of all others.
        back_label: Label of the back entry.
        show_exit: Whether the quit action is offered on this level.
    """

    label: str = ""
    back: Optional[LevelTarget] = None
    back_label: str = "Back"
    show_exit: bool = True

    __menu_declarations__: dict[str, Any] = {}
    _context: Optional["NavigationContext"] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declarations = dict(getattr(cls, "__menu_declarations__", {}))
        for name, value in vars(cls).items():
            if isinstance(value, NavigationDeclaration) or action_spec_of(value) is not None:
                declarations[name] = value
            elif name in declarations:
                # overridden by a plain attribute
                del declarations[name]
        cls.__menu_declarations__ = declarations

    def attach(self, context: "NavigationContext") -> None:
        self._context = context

    @property
    def context(self) -> "NavigationContext":
        if self._context is None:
            raise NavigationError(
                f"Level {type(self).__qualname__} is not registered with a navigation context"
            )
        return self._context

    def navigate(self, target: LevelTarget) -> None:
        """Make ``target`` the current level."""
        if isinstance(target, str):
            target = self.context.level_type(target)
        self.context.navigate(target)

    def declared_actions(self) -> list[Action]:
        """The level's own actions, in declaration order."""
        actions: list[Action] = []
        for name, declaration in self.__menu_declarations__.items():
            if isinstance(declaration, NavigationDeclaration):
                actions.append(declaration.bind(self.context))
            else:
                spec = action_spec_of(declaration)
                actions.append(ActionDescriptor(spec.label, spec.order, getattr(self, name), name))
        return actions

    def back_action(self) -> Optional[NavigationAction]:
        if self.back is None:
            return None
        return NavigationAction(self.back_label, self.back, self.context)

    def invalid_actions(self) -> list[str]:
        """Names of declared action methods that cannot be called without arguments."""
        return [
            name
            for name, declaration in self.__menu_declarations__.items()
            if not isinstance(declaration, NavigationDeclaration)
            and not takes_no_arguments(getattr(self, name))
        ]


class MenuOption:
    """An action contributed to a level from outside the level class.

    Attributes:
        level: Type of the level the option is displayed on.
    """

    level: type
    label: str = ""
    order: int = 0

    def run(self) -> None:
        raise NotImplementedError


class QuitAction:
    """The action that ends the interactive loop once it has run."""

    label: str = "Quit"
    order: int = 0

    def run(self) -> None:
        pass


class ExitAction(QuitAction):
    """Stock quit action, installed when no quit action is registered and none is required."""

    label = "Exit"
