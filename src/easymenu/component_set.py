"""Container for resolved components, keyed by type identity.

The resolver fills a component set as it instantiates components, and the
same set answers "is this dependency available yet?" during resolution.
Instances supplied up front (the scope) are available as dependencies but
are not components in their own right.
"""

from typing import Any, Iterator, Optional

from easymenu.domain import InstantiatedComponent


class ComponentSet:
    """Instantiated components in instantiation order, plus scoped instances.

    Example:
        >>> components = ComponentSet(scope={NavigationContext: context})
        >>> NavigationContext in components
        True
        >>> components.add(instantiated)
        >>> components[Database]
    """

    def __init__(self, scope: Optional[dict[type, Any]] = None):
        self._scope = dict(scope or {})
        self.components: dict[type, InstantiatedComponent] = {}

    def add(self, component: InstantiatedComponent) -> None:
        self.components[component.component_type] = component

    def instance(self, component_type: type) -> Any:
        """The instance available for ``component_type``, component or scoped."""
        if component_type in self.components:
            return self.components[component_type].component
        if component_type in self._scope:
            return self._scope[component_type]
        raise KeyError(component_type)

    def satisfies(self, dependencies: tuple[type, ...]) -> bool:
        return all(dependency in self for dependency in dependencies)

    def __getitem__(self, item: type) -> Any:
        return self.instance(item)

    def __contains__(self, item: type) -> bool:
        return item in self.components or item in self._scope

    def __iter__(self) -> Iterator[InstantiatedComponent]:
        return iter(self.components.values())

    def __len__(self) -> int:
        return len(self.components)
