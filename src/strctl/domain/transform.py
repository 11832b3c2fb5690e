"""Transformer ABC, builtin character transformers, and a name registry.

A transformer maps one element to another. Sequences accept them two ways:
- ``Sequence.apply(transformer)`` dispatches through this ABC.
- ``Sequence.modify(func)`` takes any plain callable.

The registry lets callers pick a transformer by name at runtime. Plugins
add entries through :func:`register_transformer`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Transformer(ABC, Generic[T]):
    """Map one element to another."""

    @abstractmethod
    def transform(self, original: T) -> T:
        """Return the replacement for *original*."""
        ...

    def __call__(self, original: T) -> T:
        return self.transform(original)


class FunctionTransformer(Transformer[T]):
    """Wrap a plain callable as a :class:`Transformer`."""

    def __init__(self, func: Callable[[T], T]) -> None:
        self._func = func

    def transform(self, original: T) -> T:
        return self._func(original)

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionTransformer({name})"


class ToUpperChar(Transformer[str]):
    """Upper-case ASCII ``a``-``z``; every other character passes through."""

    def transform(self, original: str) -> str:
        if "a" <= original <= "z" and len(original) == 1:
            return chr(ord(original) - 32)
        return original


class ToLowerChar(Transformer[str]):
    """Lower-case ASCII ``A``-``Z``; every other character passes through."""

    def transform(self, original: str) -> str:
        if "A" <= original <= "Z" and len(original) == 1:
            return chr(ord(original) + 32)
        return original


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

TRANSFORMER_REGISTRY: dict[str, Transformer[object]] = {}


def register_transformer(name: str, transformer: Transformer[object]) -> None:
    """Register *transformer* under *name*, replacing any previous entry."""
    if not name:
        msg = "Transformer name must be non-empty"
        raise ValueError(msg)
    if not isinstance(transformer, Transformer):
        msg = f"Expected a Transformer, got {type(transformer).__name__}"
        raise TypeError(msg)
    TRANSFORMER_REGISTRY[name] = transformer


def get_transformer(name: str) -> Transformer[object]:
    """Look up a registered transformer. Raises KeyError if unknown."""
    return TRANSFORMER_REGISTRY[name]


def list_transformers() -> list[str]:
    """Return registered transformer names, sorted."""
    return sorted(TRANSFORMER_REGISTRY)
