"""A type identity that compares by type and prints as the type's name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TypeKey:
    """Identifies a type: equal and hashed by ``id``, shown by ``name``."""

    id: Any
    name: str = field(compare=False)

    @classmethod
    def of(cls, tp: Any) -> TypeKey:
        """Return the key of the type ``tp``."""
        qualname = getattr(tp, "__qualname__", None)
        if qualname is None:
            name = repr(tp)
        else:
            module = getattr(tp, "__module__", None)
            name = f"{module}.{qualname}" if module else qualname
        return cls(tp, name)

    def __repr__(self) -> str:
        return self.name

    __str__ = __repr__