"""Utilities for constructing InstantiatedComponent objects."""

from easymenu.component_set import ComponentSet
from easymenu.domain import ComponentDescriptor, Constructor, InstantiatedComponent


class ComponentBuilder:
    """Build :class:`InstantiatedComponent` instances from descriptors."""

    def build(
        self,
        descriptor: ComponentDescriptor,
        constructor: Constructor,
        components: ComponentSet,
    ) -> InstantiatedComponent:
        """Invoke a constructor with its dependencies looked up in ``components``.

        Args:
            descriptor: The descriptor being instantiated.
            constructor: The selected constructor; all its dependencies must be available.
            components: Components resolved so far.

        Returns:
            The resulting :class:`InstantiatedComponent`.
        """
        dependencies = [components[dependency] for dependency in constructor.dependencies]
        component_obj = constructor.factory(*dependencies)
        return InstantiatedComponent(descriptor, component_obj, constructor, dependencies)
