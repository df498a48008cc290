"""High level entry points for building and running a menu."""

import logging
from typing import Iterable, Optional, Union

from rich.console import Console

from easymenu.classifier import ComponentClassifier
from easymenu.console import ConsolePrompt, ConsoleRenderer
from easymenu.context import NavigationContext
from easymenu.domain import ComponentDescriptor
from easymenu.executor import MenuExecutor
from easymenu.registry import ComponentRegistry
from easymenu.resolver import ComponentResolver
from easymenu.settings import MenuSettings

__all__ = ["make_context", "make_executor", "start"]

logger = logging.getLogger(__name__)

DescriptorSource = Union[ComponentRegistry, Iterable[ComponentDescriptor]]


def make_context(
    source: DescriptorSource,
    settings: Optional[MenuSettings] = None,
) -> NavigationContext:
    """Resolve all components and return the initialised navigation context.

    The context itself is available as a dependency, so any component may
    declare a ``NavigationContext`` constructor parameter.

    Args:
        source: A registry, or the descriptors to resolve.
        settings: Menu settings; only ``require_quit_action`` is used here.

    Returns:
        A :class:`NavigationContext` whose current level is the home level.

    Raises:
        ConfigurationError: If components cannot be resolved, or the home level
            or quit action is missing or declared more than once.

    Example:
        >>> context = make_context(registry)
        >>> context.current
    """
    settings = settings or MenuSettings()
    descriptors = source.descriptors() if isinstance(source, ComponentRegistry) else list(source)

    context = NavigationContext()
    resolver = ComponentResolver([ComponentClassifier(context)])
    resolver.resolve(descriptors, scope={NavigationContext: context})
    context.post_init(settings.require_quit_action)
    return context


def make_executor(
    context: NavigationContext,
    settings: Optional[MenuSettings] = None,
    console: Optional[Console] = None,
) -> MenuExecutor:
    """Create an executor drawing on, and reading from, a rich console."""
    console = console or Console()
    return MenuExecutor(context, settings, ConsoleRenderer(console), ConsolePrompt(console))


def start(
    source: DescriptorSource,
    settings: Optional[MenuSettings] = None,
    console: Optional[Console] = None,
) -> NavigationContext:
    """Build the menu and run it until the quit action is selected.

    Configuration errors propagate before anything is displayed.

    Returns:
        The navigation context, once the loop has ended.
    """
    settings = settings or MenuSettings()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.log_level)

    context = make_context(source, settings)
    logger.info("Starting menu at %s", type(context.current).__qualname__)
    make_executor(context, settings, console).run()
    return context
