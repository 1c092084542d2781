# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""AttributeMap - ordered attribute set of a single element.

Keys are kept in insertion order. Overwriting a key keeps it at its original
position. A ``None`` value removes the key; an empty string is stored and the
renderer simply omits it.

Example:
    >>> attrs = AttributeMap({'id': 'main'})
    >>> attrs.set('class', 'box')
    >>> attrs.add_class('wide')
    >>> attrs.to_ordered_pairs()
    [('id', 'main'), ('class', 'box wide')]
    >>> attrs.set('id', None)
    >>> list(attrs)
    ['class']
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterator

from .exceptions import InvalidKeyError


def normalize_key(key: Any, prefix: str = "") -> str:
    """Resolve an attribute key to its final string form.

    Enum members resolve to their value. When ``prefix`` is given it is
    added unless the key already starts with it, so ``'label'`` and
    ``'aria-label'`` both give ``'aria-label'``.

    Raises:
        InvalidKeyError: If the resolved key is not a non-empty string.
    """
    resolved = key.value if isinstance(key, Enum) else key

    if not isinstance(resolved, str) or resolved == "":
        raise InvalidKeyError(key)

    if prefix and not resolved.startswith(prefix):
        resolved = f"{prefix}{resolved}"

    return resolved


class AttributeMap(Mapping):
    """An insertion-ordered mapping of attribute names to values.

    Values are stored as given (strings, numbers, booleans, enum members,
    containers, deferred callables or any object convertible with ``str()``)
    and are only resolved when rendered.
    """

    __slots__ = ("_data",)

    def __init__(self, source: Mapping[Any, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if source:
            self.set_many(source)

    # ==================== Mapping protocol ====================

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AttributeMap({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeMap):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    # ==================== Mutation ====================

    def set(self, key: Any, value: Any) -> None:
        """Set a single attribute.

        Args:
            key: Non-empty string or enum member with a non-empty string value.
            value: Attribute value. None removes the key.

        Raises:
            InvalidKeyError: If the key is invalid.
        """
        name = normalize_key(key)
        if value is None:
            self._data.pop(name, None)
        else:
            self._data[name] = value

    def remove(self, key: Any) -> None:
        """Remove an attribute if present."""
        name = key.value if isinstance(key, Enum) else key
        self._data.pop(name, None)

    def set_many(self, values: Mapping[Any, Any]) -> None:
        """Apply several attributes in order.

        Enum keys are resolved and other keys are converted with ``str()``.
        A None value removes its key.
        """
        for key, value in values.items():
            if isinstance(key, Enum):
                key = key.value
            elif not isinstance(key, str):
                key = str(key)
            self.set(key, value)

    def add_class(self, value: Any, override: bool = False) -> None:
        """Append CSS classes to the ``class`` attribute.

        Args:
            value: Class names (string, enum member or ``str()``-able object).
                None removes the attribute; an empty string is a no-op.
            override: If True, replace the existing classes instead of
                appending.
        """
        if value is None:
            self._data.pop("class", None)
            return

        if isinstance(value, Enum):
            value = value.value
        value = str(value).strip()

        if value == "":
            return

        current = self._data.get("class")
        if override or current in (None, ""):
            self._data["class"] = value
            return

        if isinstance(current, (list, tuple)):
            current = " ".join(str(item) for item in current)
        elif isinstance(current, Enum):
            current = current.value

        existing = str(current).split()
        new = [name for name in value.split() if name not in existing]
        if new:
            self._data["class"] = " ".join(existing + new)

    def clear(self) -> None:
        """Remove all attributes."""
        self._data.clear()

    # ==================== Access ====================

    def get(self, key: Any, default: Any = None) -> Any:
        """Get an attribute value, or default if missing."""
        name = key.value if isinstance(key, Enum) else key
        return self._data.get(name, default)

    def to_ordered_pairs(self) -> list[tuple[str, Any]]:
        """Return the (name, value) pairs in rendering order."""
        return list(self._data.items())

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict copy."""
        return dict(self._data)

    def copy(self) -> AttributeMap:
        """Return a shallow copy."""
        new = AttributeMap()
        new._data = dict(self._data)
        return new
