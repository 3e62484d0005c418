from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ._errors import ItemNotFoundError
from ._registry import EntryKind, Registry, RegistryEntry
from ._resolver import Resolver
from ._signature import extract_parameter_names, parameter_defaults, split_registration


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


logger = logging.getLogger(__name__)


class _NotFound:
    """Type of the `NOT_FOUND` sentinel returned by a suppressed lookup miss."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Any = _NotFound()


class Container:
    """Minimal name-based DI container.

    - register plain values, singleton factories or instance factories
    - factory parameters are matched by name against other registrations
    - `lock()` freezes the registry; later mutations are ignored.

    Example:
      container.register_value("config", {"env": "prod"})
      container.register_singleton("logger", lambda config: make_logger(config["env"]))
      container.register_instance("request", ["logger", Request])
      container.get("request")

    """

    def __init__(self) -> None:
        self._registry = Registry()
        self._resolver = Resolver(self._registry)

    @property
    def locked(self) -> bool:
        return self._registry.locked

    def register_value(self, name: str, value: Any) -> None:
        """Register a pre-built value; it is returned as-is by `get`."""
        if self.locked:
            logger.debug("Container is locked; ignoring value '%s'", name)
            return
        _validate_name(name)
        self._registry.add(RegistryEntry.value(name, value))
        logger.debug("Registered value '%s'", name)

    def register_singleton(
        self,
        name: str,
        factory: Callable[..., Any] | list[Any] | tuple[Any, ...],
        *,
        depends_on: Iterable[str] | None = None,
    ) -> None:
        """Register a factory that is called once, on first `get`.

        `factory` is either a callable, whose parameter names are its
        dependencies, or a list of dependency names followed by the callable
        (``["db", "cache", make_repo]``).
        """
        self._register_factory(EntryKind.SINGLETON, name, factory, depends_on)

    def register_instance(
        self,
        name: str,
        factory: Callable[..., Any] | list[Any] | tuple[Any, ...],
        *,
        depends_on: Iterable[str] | None = None,
    ) -> None:
        """Register a factory that is called again on every `get`.

        Accepts the same `factory` forms as `register_singleton`.
        """
        self._register_factory(EntryKind.INSTANCE, name, factory, depends_on)

    def _register_factory(
        self,
        kind: EntryKind,
        name: str,
        factory_or_list: Any,
        depends_on: Iterable[str] | None,
    ) -> None:
        if self.locked:
            logger.debug("Container is locked; ignoring %s '%s'", kind.value, name)
            return
        _validate_name(name)

        factory, explicit_names = split_registration(factory_or_list)
        if depends_on is not None:
            if explicit_names is not None:
                msg = "Provide dependency names either in the registration list or via `depends_on`, not both."
                raise ValueError(msg)
            explicit_names = (depends_on,) if isinstance(depends_on, str) else tuple(depends_on)

        dependency_names = extract_parameter_names(factory, explicit_names)
        defaults = parameter_defaults(factory) if explicit_names is None else None
        self._registry.add(RegistryEntry.factory(name, kind, factory, dependency_names, defaults))
        logger.debug("Registered %s '%s' depending on %s", kind.value, name, list(dependency_names))

    def get(self, name: str, suppress_not_found_error: bool = False) -> Any:  # noqa: FBT001, FBT002
        """Resolve `name` to a value.

        A miss on `name` itself raises ItemNotFoundError, or returns `NOT_FOUND`
        when `suppress_not_found_error` is set. Misses further down the
        dependency graph always raise MissingDependencyError.
        """
        with self._registry.mutex:
            if name not in self._registry:
                if suppress_not_found_error:
                    return NOT_FOUND
                raise ItemNotFoundError(name)

            return self._resolver.resolve(name)

    def has(self, name: str) -> bool:
        return name in self._registry

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return self._registry.names()

    def reset(self) -> None:
        """Remove every registration. Ignored once locked."""
        if self._registry.clear():
            logger.debug("Container reset")

    def lock(self) -> None:
        """Freeze the container; there is no unlock."""
        self._registry.lock()
        logger.debug("Container locked with %d registrations", len(self._registry))

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)


def _validate_name(name: object) -> None:
    if not isinstance(name, str):
        msg = f"Registration names must be strings, got {type(name).__name__}"
        raise TypeError(msg)
    if not name.strip():
        msg = "Registration names must not be empty"
        raise ValueError(msg)
    if name != name.strip():
        msg = f"Registration name {name!r} has leading or trailing whitespace"
        raise ValueError(msg)
