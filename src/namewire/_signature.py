"""Derive the dependency names of a factory.

A factory's dependencies are its positional parameter names, in declaration
order. Callers may bypass introspection by supplying the names explicitly,
either as leading elements of a registration list (``["db", "cache", factory]``)
or through ``depends_on``.
"""

from __future__ import annotations

import inspect
import re
from typing import TYPE_CHECKING, Any

from ._errors import SignatureExtractionError


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


_STRIP_COMMENTS = re.compile(r"(/\*.*?\*/)|(//[^\n]*)", re.DOTALL)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def extract_parameter_names(
    factory: Callable[..., Any],
    explicit_names: Iterable[str] | None = None,
) -> tuple[str, ...]:
    """Return the ordered dependency names for `factory`.

    Every positional parameter is a dependency, including those with a
    default; the default is used only when the name is not registered (see
    `parameter_defaults`). Explicit names are kept as given apart from
    `//` and `/* */` comments and surrounding whitespace; a single string is
    one name.

    Raises SignatureExtractionError when the factory is not callable or its
    parameter list cannot be read.
    """
    if not callable(factory):
        msg = f"Factory {factory!r} is not callable"
        raise SignatureExtractionError(msg)

    if explicit_names is not None:
        if isinstance(explicit_names, str):
            explicit_names = (explicit_names,)
        return _clean_names(explicit_names)

    try:
        sig = inspect.signature(factory)
    except (TypeError, ValueError) as e:
        msg = f"Unable to read the parameter list of {_describe(factory)}: {e}"
        raise SignatureExtractionError(msg) from e

    names: list[str] = []
    for p in sig.parameters.values():
        if p.kind in _POSITIONAL:
            names.append(p.name)
        elif p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty:
            msg = (
                f"Keyword-only parameter '{p.name}' of {_describe(factory)} has no default "
                "and cannot be supplied as a positional dependency"
            )
            raise SignatureExtractionError(msg)
        # *args / **kwargs and defaulted keyword-only parameters are not dependencies

    return tuple(names)


def parameter_defaults(factory: Callable[..., Any]) -> dict[str, Any]:
    """Defaults of the positional parameters of `factory`, by name."""
    try:
        sig = inspect.signature(factory)
    except (TypeError, ValueError):
        return {}

    return {
        p.name: p.default
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is not inspect.Parameter.empty
    }


def split_registration(
    factory_or_list: Any,
) -> tuple[Callable[..., Any], tuple[str, ...] | None]:
    """Split a registration argument into ``(factory, explicit_names)``.

    ``["a", "b", f]`` and ``[["a", "b"], f]`` both give ``(f, ("a", "b"))``;
    anything else is taken as the factory with ``None`` for the names.
    """
    if isinstance(factory_or_list, (list, tuple)) and factory_or_list and callable(factory_or_list[-1]):
        *leading, factory = factory_or_list
        if len(leading) == 1 and isinstance(leading[0], (list, tuple)):
            leading = list(leading[0])
        return factory, tuple(leading)

    return factory_or_list, None


def _clean_names(raw_names: Iterable[str]) -> tuple[str, ...]:
    names: list[str] = []
    for raw in raw_names:
        if not isinstance(raw, str):
            msg = f"Dependency names must be strings, got {raw!r}"
            raise SignatureExtractionError(msg)

        name = _STRIP_COMMENTS.sub("", raw).strip()
        if name:
            names.append(name)

    return tuple(names)


def _describe(factory: object) -> str:
    return getattr(factory, "__qualname__", None) or repr(factory)
