"""The interactive loop.

Each iteration displays the current level, waits for a valid selection and
runs it. Failing actions are reported and the loop carries on; the loop
only ends once the quit action has run.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from easymenu.actions import Action
from easymenu.console import ConsolePrompt, ConsoleRenderer, Prompt, Renderer
from easymenu.context import NavigationContext
from easymenu.levels import MenuLevel
from easymenu.settings import MenuSettings

__all__ = ["DisplayAction", "MenuExecutor"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayAction:
    key: int
    action: Action

    @property
    def label(self) -> str:
        return self.action.label


class MenuExecutor:
    """Runs the menu held by an initialised :class:`NavigationContext`."""

    def __init__(
        self,
        context: NavigationContext,
        settings: Optional[MenuSettings] = None,
        renderer: Optional[Renderer] = None,
        prompt: Optional[Prompt] = None,
    ):
        self._context = context
        self._settings = settings or MenuSettings()
        self._renderer = renderer or ConsoleRenderer()
        self._prompt = prompt or ConsolePrompt()

    def run(self) -> None:
        """Loop until the quit action has been selected and run."""
        while True:
            selected = self.select_action()
            if selected.action is self._context.quit_action:
                self._quit(selected.action)
                return
            self._execute(selected.action)

    def display_actions(self, level: MenuLevel) -> list[DisplayAction]:
        """The entries shown for ``level``, keyed in display order.

        The back entry, if any, comes first. The level's own actions and the
        options registered for it follow, sorted by ``order`` with ties kept in
        declaration order. The quit action, when shown, gets the reserved quit key.
        """
        merged: list[Action] = [*level.declared_actions(), *self._context.options(type(level))]
        ordered = sorted(merged, key=lambda a: a.order)

        back = level.back_action()
        if back is not None:
            ordered.insert(0, back)

        display_actions = [
            DisplayAction(self._settings.first_key + index, a)
            for index, a in enumerate(ordered)
        ]
        if level.show_exit:
            display_actions.append(
                DisplayAction(self._settings.quit_key, self._context.quit_action)
            )
        return display_actions

    def select_action(self) -> DisplayAction:
        """Display the current level and block until a listed key is entered."""
        level = self._context.current
        display_actions = self.display_actions(level)
        by_key = {d.key: d for d in display_actions}

        self._renderer.display(level.label, [(d.key, d.label) for d in display_actions])
        while True:
            key = self._prompt.read_int(self._settings.prompt)
            if key in by_key:
                return by_key[key]
            self._renderer.error(self._settings.invalid_choice_message)

    def _execute(self, action: Action) -> None:
        try:
            action.run()
        except Exception as e:
            logger.exception("Error running action %r", action.label)
            self._renderer.error(f"Error running selected action! {e}")

    def _quit(self, action: Action) -> None:
        try:
            action.run()
        except Exception as e:
            logger.exception("Error running quit action %r", action.label)
            self._renderer.error(f"Error running quit action! {e}")
        logger.debug("Quit action %r has run, leaving the menu", action.label)
