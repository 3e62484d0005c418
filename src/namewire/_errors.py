from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence


class ContainerError(RuntimeError):
    pass


class SignatureExtractionError(ContainerError):
    """The factory does not expose a parameter list that can be turned into dependency names."""


class ResolutionError(ContainerError):
    pass


class MissingDependencyError(ResolutionError, KeyError):
    """A requested or transitively required name is not registered."""

    def __init__(self, name: str, chain: Sequence[str] = ()) -> None:
        self.name = name
        self.chain = tuple(chain)
        self.dependent = self.chain[-1] if self.chain else None
        msg = f"Failed to resolve dependency. Could not find a module called {name}"
        if self.dependent is not None:
            msg += f" (required by {self.dependent})"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would render the repr of the message
        return str(self.args[0])


class ItemNotFoundError(MissingDependencyError):
    """The top-level name passed to `get` is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.args = (f"Item not found: {name} - was it registered?",)


class CircularDependencyError(ResolutionError):
    """A name reappeared in its own resolution chain.

    `name` is the entry that was re-entered, `chain` the names under resolution
    when it was requested again (outermost first). `path` is the chain closed
    back onto `name`, e.g. ``("a", "b", "a")``.
    """

    def __init__(self, name: str, chain: Sequence[str]) -> None:
        self.name = name
        self.chain = tuple(chain)
        self.path = (*self.chain, name)
        msg = (
            f"Calling {name} resolved a dependency that depends on this item. "
            f"Chain: {' -> '.join(self.path)}"
        )
        super().__init__(msg)
