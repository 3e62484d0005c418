from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


logger = logging.getLogger(__name__)


class EntryKind(Enum):
    VALUE = "value"
    SINGLETON = "singleton"
    INSTANCE = "instance"


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


UNSET: Any = _Unset()


@dataclass
class RegistryEntry:
    name: str
    kind: EntryKind
    target: Any
    dependency_names: tuple[str, ...] | None = None
    cached_value: Any = field(default=UNSET)  # VALUE at registration, SINGLETON after first resolve
    defaults: dict[str, Any] = field(default_factory=dict)  # used for unregistered dependencies

    @property
    def is_cached(self) -> bool:
        return self.cached_value is not UNSET

    @classmethod
    def value(cls, name: str, value: Any) -> RegistryEntry:
        return cls(name=name, kind=EntryKind.VALUE, target=value, cached_value=value)

    @classmethod
    def factory(
        cls,
        name: str,
        kind: EntryKind,
        factory: Callable[..., Any],
        dependency_names: tuple[str, ...],
        defaults: dict[str, Any] | None = None,
    ) -> RegistryEntry:
        if kind is EntryKind.VALUE:
            msg = "Value entries are built with RegistryEntry.value()"
            raise ValueError(msg)
        return cls(
            name=name,
            kind=kind,
            target=factory,
            dependency_names=dependency_names,
            defaults=dict(defaults or {}),
        )


class Registry:
    """Name -> entry mapping that can be frozen with `lock()`.

    Mutations made after `lock()` are ignored. The re-entrant `mutex` is shared
    with the resolver so that mutation and singleton computation never interleave.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._locked = False
        self.mutex = threading.RLock()

    @property
    def locked(self) -> bool:
        return self._locked

    def add(self, entry: RegistryEntry) -> bool:
        """Store `entry`, replacing any previous entry of the same name.

        Returns False (and stores nothing) when the registry is locked.
        """
        with self.mutex:
            if self._locked:
                logger.debug("Registry is locked; ignoring registration of '%s'", entry.name)
                return False
            if entry.name in self._entries:
                logger.debug("Replacing registration '%s'", entry.name)
            self._entries[entry.name] = entry
            return True

    def clear(self) -> bool:
        with self.mutex:
            if self._locked:
                logger.debug("Registry is locked; ignoring reset")
                return False
            self._entries = {}
            return True

    def lock(self) -> None:
        with self.mutex:
            self._locked = True

    def get(self, name: str) -> RegistryEntry | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(list(self._entries.values()))
