"""Easy Menu: declarative console menus.

A host application declares menu levels, options and a quit action as plain
classes, and Easy Menu instantiates them in dependency order, checks that
the menu is well formed and runs an interactive loop over it.

Key Features:
    - Levels, options and actions declared with decorators
    - Constructor injection driven by type hints, with alternative constructors
    - Fail-fast validation: exactly one home level and one quit action
    - Navigation between levels by type, from inside action bodies
    - A loop that survives failing actions

Basic Usage:
    >>> from easymenu import ComponentRegistry, MenuLevel, QuitAction, action, start
    >>>
    >>> registry = ComponentRegistry()
    >>>
    >>> @registry.level(home=True)
    ... class Main(MenuLevel):
    ...     label = "Main"
    ...
    ...     @action("Say hello", order=1)
    ...     def hello(self):
    ...         print("Hello")
    >>>
    >>> registry.quit_action()(QuitAction)
    >>> start(registry)

The package consists of several modules:
    - registry: Component declaration and descriptor construction
    - resolver: Dependency-ordered instantiation
    - classifier: Registration of instantiated components with the context
    - context: The navigation state machine
    - executor: The interactive loop
    - builders: Entry points wiring everything together
    - errors: Framework-specific exceptions
"""

from easymenu.actions import action, navigation
from easymenu.builders import make_context, make_executor, start
from easymenu.context import NavigationContext
from easymenu.levels import ExitAction, MenuLevel, MenuOption, QuitAction
from easymenu.registry import ComponentRegistry, constructor
from easymenu.settings import MenuSettings

__all__ = [
    "ComponentRegistry",
    "ExitAction",
    "MenuLevel",
    "MenuOption",
    "MenuSettings",
    "NavigationContext",
    "QuitAction",
    "action",
    "constructor",
    "make_context",
    "make_executor",
    "navigation",
    "start",
]
