"""Process-wide default container.

Applications that want a single container per process can use the module-level
functions re-exported from `namewire` instead of passing a `Container` around.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from ._container import Container


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


_container: Container | None = None
_guard = threading.Lock()


def get_container() -> Container:
    """Return the default container, creating it on first use."""
    global _container  # noqa: PLW0603
    with _guard:
        if _container is None:
            _container = Container()
        return _container


def reset_default_container() -> None:
    """Discard the default container, lock state included (for tests)."""
    global _container  # noqa: PLW0603
    with _guard:
        _container = None


def register_value(name: str, value: Any) -> None:
    get_container().register_value(name, value)


def register_singleton(
    name: str,
    factory: Callable[..., Any] | list[Any] | tuple[Any, ...],
    *,
    depends_on: Iterable[str] | None = None,
) -> None:
    get_container().register_singleton(name, factory, depends_on=depends_on)


def register_instance(
    name: str,
    factory: Callable[..., Any] | list[Any] | tuple[Any, ...],
    *,
    depends_on: Iterable[str] | None = None,
) -> None:
    get_container().register_instance(name, factory, depends_on=depends_on)


def get(name: str, suppress_not_found_error: bool = False) -> Any:  # noqa: FBT001, FBT002
    return get_container().get(name, suppress_not_found_error)


def reset() -> None:
    get_container().reset()


def lock() -> None:
    get_container().lock()
