"""Classification of instantiated components into the navigation model."""

import logging

from easymenu.context import NavigationContext
from easymenu.domain import InstantiatedComponent
from easymenu.errors import DescriptorError, InvalidActionSignatureError
from easymenu.levels import MenuLevel, MenuOption, QuitAction

__all__ = ["ComponentClassifier"]

logger = logging.getLogger(__name__)


class ComponentClassifier:
    """Resolver listener registering levels, options and the quit action with a context.

    Injectable components are left alone.
    """

    def __init__(self, context: NavigationContext):
        self._context = context

    def __call__(self, component: InstantiatedComponent) -> None:
        descriptor = component.descriptor
        instance = component.component

        if descriptor.is_level:
            self._register_level(_expect(instance, MenuLevel, descriptor.name), descriptor.is_home)
        elif descriptor.is_option:
            option = _expect(instance, MenuOption, descriptor.name)
            level_type = descriptor.level or getattr(option, "level", None)
            if level_type is None:
                raise DescriptorError(f"Option {descriptor.name} is not bound to a level")
            self._context.add_option(level_type, option)
            logger.debug("Registered option %s for %s", descriptor.name, level_type.__qualname__)
        elif descriptor.is_quit_action:
            self._context.set_quit_action(_expect(instance, QuitAction, descriptor.name))
            logger.debug("Registered quit action %s", descriptor.name)

    def _register_level(self, level: MenuLevel, is_home: bool) -> None:
        invalid = level.invalid_actions()
        if invalid:
            raise InvalidActionSignatureError(level, invalid[0])

        self._context.add_level(level)
        if is_home:
            self._context.set_home(level)
        logger.debug("Registered level %s%s", type(level).__qualname__, " (home)" if is_home else "")


def _expect(instance, expected_type: type, name: str):
    if not isinstance(instance, expected_type):
        raise DescriptorError(
            f"{name} was declared as a {expected_type.__name__} "
            f"but produced {type(instance).__qualname__}"
        )
    return instance
