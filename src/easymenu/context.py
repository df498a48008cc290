"""The navigation state machine.

A :class:`NavigationContext` is populated while components are resolved
(``add_level``, ``set_home``, ``set_quit_action``, ``add_option``), frozen by a
single call to :meth:`NavigationContext.post_init`, and from then on only its
current level changes, through :meth:`NavigationContext.navigate`.
"""

import logging
from collections import defaultdict
from typing import Optional

from easymenu.errors import (
    ConfigurationError,
    MissingHomeError,
    MissingQuitActionError,
    MultipleHomeError,
    MultipleQuitError,
    UnknownLevelError,
)
from easymenu.levels import ExitAction, MenuLevel, MenuOption, QuitAction

__all__ = ["NavigationContext"]

logger = logging.getLogger(__name__)


class NavigationContext:
    """Registered levels, options, the home level, the quit action and the current level."""

    def __init__(self):
        self._levels: list[MenuLevel] = []
        self._options: dict[type, list[MenuOption]] = defaultdict(list)
        self._home: Optional[MenuLevel] = None
        self._quit_action: Optional[QuitAction] = None
        self._current: Optional[MenuLevel] = None
        self._initialised = False

    @property
    def levels(self) -> list[MenuLevel]:
        return list(self._levels)

    @property
    def home(self) -> Optional[MenuLevel]:
        return self._home

    @property
    def quit_action(self) -> Optional[QuitAction]:
        return self._quit_action

    @property
    def initialised(self) -> bool:
        return self._initialised

    @property
    def current(self) -> MenuLevel:
        if self._current is None:
            raise ConfigurationError("The navigation context has not been initialised")
        return self._current

    def add_level(self, level: MenuLevel) -> None:
        self._require_build_phase("add_level")
        level.attach(self)
        self._levels.append(level)

    def set_home(self, level: MenuLevel) -> None:
        self._require_build_phase("set_home")
        if self._home is not None:
            raise MultipleHomeError(self._home, level)
        self._home = level

    def set_quit_action(self, quit_action: QuitAction) -> None:
        self._require_build_phase("set_quit_action")
        if self._quit_action is not None:
            raise MultipleQuitError(self._quit_action, quit_action)
        self._quit_action = quit_action

    def add_option(self, level_type: type, option: MenuOption) -> None:
        self._require_build_phase("add_option")
        self._options[level_type].append(option)

    def options(self, level_type: type) -> list[MenuOption]:
        """Options registered for ``level_type``, in registration order."""
        return list(self._options.get(level_type, []))

    def post_init(self, require_quit_action: bool = True) -> None:
        """Validate the registered components and make the home level current.

        Args:
            require_quit_action: If False and no quit action was registered, an
                :class:`~easymenu.levels.ExitAction` is installed instead of failing.

        Raises:
            MissingHomeError: If no home level was registered.
            MissingQuitActionError: If a quit action is required but none was registered.
        """
        self._require_build_phase("post_init")
        if self._home is None:
            raise MissingHomeError()
        if self._quit_action is None:
            if require_quit_action:
                raise MissingQuitActionError()
            logger.info("No quit action registered, using %s", ExitAction.__name__)
            self._quit_action = ExitAction()

        self._current = self._home
        self._initialised = True
        logger.debug(
            "Navigation context ready with %d levels, home is %s",
            len(self._levels),
            type(self._home).__qualname__,
        )

    def navigate(self, target: type) -> None:
        """Make the registered level of type ``target`` current.

        Raises:
            UnknownLevelError: If no level of that exact type is registered. The
                current level is left unchanged.
        """
        level = next((l for l in self._levels if type(l) is target), None)
        if level is None:
            raise UnknownLevelError(target)
        logger.debug(
            "Navigating from %s to %s",
            type(self._current).__qualname__ if self._current else None,
            target.__qualname__,
        )
        self._current = level

    def level_type(self, name: str) -> type:
        """Find a registered level type by class name or qualified name."""
        for level in self._levels:
            level_type = type(level)
            if name in (level_type.__name__, level_type.__qualname__):
                return level_type
        raise UnknownLevelError(name)

    def _require_build_phase(self, operation: str) -> None:
        if self._initialised:
            raise ConfigurationError(
                f"{operation} cannot be called after the navigation context has been initialised"
            )
