"""Minimal name-based dependency injection library.

Factories declare their dependencies through their parameter names; the
container resolves those names against its registry, recursively, and calls
the factory with the results.

Exports:
- `Container`: registry of values, singleton factories and instance factories.
- `NOT_FOUND`: sentinel returned by `Container.get(name, True)` on a miss.
- `EntryKind`, `RegistryEntry`: the registry data model.
- Errors: `ContainerError` and its subclasses.
- Module-level `register_value`, `register_singleton`, `register_instance`,
  `get`, `reset` and `lock`, bound to a process-wide default container
  (see `get_container` / `reset_default_container`).
"""

import logging

from ._container import NOT_FOUND, Container
from ._default import (
    get,
    get_container,
    lock,
    register_instance,
    register_singleton,
    register_value,
    reset,
    reset_default_container,
)
from ._errors import (
    CircularDependencyError,
    ContainerError,
    ItemNotFoundError,
    MissingDependencyError,
    ResolutionError,
    SignatureExtractionError,
)
from ._registry import EntryKind, RegistryEntry
from ._signature import extract_parameter_names


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "NOT_FOUND",
    "CircularDependencyError",
    "Container",
    "ContainerError",
    "EntryKind",
    "ItemNotFoundError",
    "MissingDependencyError",
    "RegistryEntry",
    "ResolutionError",
    "SignatureExtractionError",
    "extract_parameter_names",
    "get",
    "get_container",
    "lock",
    "register_instance",
    "register_singleton",
    "register_value",
    "reset",
    "reset_default_container",
]
