from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ._errors import CircularDependencyError, MissingDependencyError
from ._registry import EntryKind


if TYPE_CHECKING:
    from ._registry import Registry, RegistryEntry


logger = logging.getLogger(__name__)


class Resolver:
    """Turns a registered name into a value by recursively resolving its dependencies.

    - VALUE entries return their stored value
    - SINGLETON entries call their factory once and cache the result
    - INSTANCE entries call their factory on every resolution.

    A dependency that is not registered falls back to the factory's default
    for that parameter, when it declares one.

    Dependencies are resolved left to right, which fixes both the positional
    argument order and which error surfaces first.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def resolve(self, name: str, chain: tuple[str, ...] = ()) -> Any:
        """Resolve `name`. `chain` holds the names already under resolution, outermost first."""
        with self._registry.mutex:
            if name in chain:
                raise CircularDependencyError(name, chain)

            entry = self._registry.get(name)
            if entry is None:
                raise MissingDependencyError(name, chain)

            if entry.kind is EntryKind.VALUE:
                return entry.cached_value

            if entry.kind is EntryKind.SINGLETON:
                if not entry.is_cached:
                    logger.debug("Computing singleton '%s'", name)
                    entry.cached_value = self._call(entry, chain)
                return entry.cached_value

            return self._call(entry, chain)

    def _call(self, entry: RegistryEntry, chain: tuple[str, ...]) -> Any:
        inner_chain = (*chain, entry.name)
        args = []
        for dep in entry.dependency_names or ():
            if dep in entry.defaults and dep not in self._registry:
                args.append(entry.defaults[dep])
            else:
                args.append(self.resolve(dep, inner_chain))
        return entry.target(*args)
