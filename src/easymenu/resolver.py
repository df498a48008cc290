"""Dependency resolution for menu components.

The resolver instantiates every descriptor in an order consistent with its
dependencies by repeated relaxation: each pass walks the pending descriptors
and instantiates those for which some constructor has all of its
dependencies available, trying constructors in their declared order. It
stops when a pass makes no progress. Whatever is still pending then is
reported, which covers both cycles and dependencies on types nobody
declares.

Each instantiated component is handed to the listeners straight away, in
instantiation order; this is how components get classified into the
navigation model.
"""

import logging
from typing import Any, Callable, Iterable, Optional

from easymenu.component_builder import ComponentBuilder
from easymenu.component_set import ComponentSet
from easymenu.domain import ComponentDescriptor, Constructor, InstantiatedComponent
from easymenu.errors import DescriptorError, UnresolvedDependencyError

__all__ = ["ComponentResolver", "ComponentListener"]

logger = logging.getLogger(__name__)

ComponentListener = Callable[[InstantiatedComponent], None]


class ComponentResolver:
    """Instantiate descriptors in dependency order.

    Args:
        listeners: Called once per instantiated component, in instantiation order.
            Exceptions raised by a listener abort resolution.
        component_builder: Performs the actual instantiation.
    """

    def __init__(
        self,
        listeners: Optional[list[ComponentListener]] = None,
        component_builder: Optional[ComponentBuilder] = None,
    ):
        self._listeners = list(listeners or [])
        self._component_builder = component_builder or ComponentBuilder()

    def resolve(
        self,
        descriptors: Iterable[ComponentDescriptor],
        scope: Optional[dict[type, Any]] = None,
    ) -> ComponentSet:
        """Instantiate every descriptor.

        Args:
            descriptors: The descriptors to instantiate.
            scope: Instances available as dependencies without being resolved,
                keyed by the type they satisfy.

        Returns:
            The instantiated components, in instantiation order.

        Raises:
            DescriptorError: If two descriptors share a type, or a descriptor
                declares a type supplied by the scope.
            UnresolvedDependencyError: If some descriptors could not be instantiated.
        """
        pending = list(descriptors)
        _validate_unique_types(pending, scope or {})

        components = ComponentSet(scope)
        failures: dict[type, Exception] = {}

        made_progress = True
        while made_progress and pending:
            made_progress = False
            still_pending = []
            for descriptor in pending:
                if self._try_instantiate(descriptor, components, failures):
                    made_progress = True
                else:
                    still_pending.append(descriptor)
            pending = still_pending

        if pending:
            logger.error(
                "Unable to instantiate %s", [descriptor.name for descriptor in pending]
            )
            raise UnresolvedDependencyError(
                pending,
                {
                    descriptor.component_type: failures[descriptor.component_type]
                    for descriptor in pending
                    if descriptor.component_type in failures
                },
            )

        return components

    def _try_instantiate(
        self,
        descriptor: ComponentDescriptor,
        components: ComponentSet,
        failures: dict[type, Exception],
    ) -> bool:
        constructor = _first_satisfiable(descriptor, components)
        if constructor is None:
            return False

        try:
            component = self._component_builder.build(descriptor, constructor, components)
        except Exception as e:
            # retried on the next pass, if there is one
            logger.warning(
                "Error instantiating %s with %s: %s", descriptor.name, constructor.name, e
            )
            failures[descriptor.component_type] = e
            return False

        failures.pop(descriptor.component_type, None)
        components.add(component)
        logger.debug("Instantiated %s with %s", descriptor.name, constructor.name)

        for listener in self._listeners:
            listener(component)
        return True


def _first_satisfiable(
    descriptor: ComponentDescriptor, components: ComponentSet
) -> Optional[Constructor]:
    return next(
        (
            constructor
            for constructor in descriptor.constructors
            if components.satisfies(constructor.dependencies)
        ),
        None,
    )


def _validate_unique_types(
    descriptors: list[ComponentDescriptor], scope: dict[type, Any]
) -> None:
    seen: set[type] = set()
    for descriptor in descriptors:
        if descriptor.component_type in seen:
            raise DescriptorError(f"Duplicate descriptor for type {descriptor.name}")
        if descriptor.component_type in scope:
            raise DescriptorError(
                f"Descriptor for {descriptor.name} conflicts with an instance supplied by scope"
            )
        seen.add(descriptor.component_type)
