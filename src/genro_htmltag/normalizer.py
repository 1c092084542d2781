# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value normalization for attribute rendering.

Every attribute value goes through ``normalize()`` at render time, which turns
it into one of three decisions:

- ``Omit``: the attribute does not appear in the output.
- ``BareFlag``: the attribute appears without a value (``<div hidden>``).
- ``KeyValue``: the attribute appears as ``name="value"`` or ``name='value'``.

Resolution order:
    1. ``None`` is omitted.
    2. Zero-argument callables are called once and their result is normalized.
    3. Enum members resolve to their value.
    4. Booleans are bare flags for boolean attributes, ``"true"``/``"false"``
       otherwise.
    5. Containers render as JSON, except ``class`` lists and ``style`` dicts.
    6. Other objects are converted with ``str()``.
    7. Numbers use standard decimal formatting.
    8. Empty strings are omitted.
    9. Any other string is kept as is.

Example:
    >>> normalize('hidden', True)
    BareFlag(name='hidden')
    >>> normalize('aria-pressed', True)
    KeyValue(name='aria-pressed', value='true', quote='"')
    >>> normalize('data-config', {'a': 1})
    KeyValue(name='data-config', value='{"a":1}', quote="'")
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

logger = logging.getLogger(__name__)

DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

# Attributes whose presence alone means true.
BOOLEAN_ATTRIBUTES: frozenset[str] = frozenset({
    "allowfullscreen",
    "async",
    "autofocus",
    "autoplay",
    "checked",
    "controls",
    "default",
    "defer",
    "disabled",
    "formnovalidate",
    "hidden",
    "inert",
    "ismap",
    "itemscope",
    "loop",
    "multiple",
    "muted",
    "nomodule",
    "novalidate",
    "open",
    "playsinline",
    "readonly",
    "required",
    "reversed",
    "selected",
})

# Container keys expanded into prefixed attributes.
EXPANDED_KEYS: frozenset[str] = frozenset({"data", "aria"})


@dataclass(frozen=True)
class Omit:
    """The attribute is not rendered."""

    name: str


@dataclass(frozen=True)
class BareFlag:
    """The attribute is rendered without a value."""

    name: str


@dataclass(frozen=True)
class KeyValue:
    """The attribute is rendered with a value and a quote character."""

    name: str
    value: str
    quote: str = DOUBLE_QUOTE


RenderDecision = Union[Omit, BareFlag, KeyValue]

# A zero-argument callable evaluated at render time.
DeferredValue = Callable[[], Any]


def is_deferred(value: Any) -> bool:
    """True if value is a deferred value (a callable that is not a class)."""
    return callable(value) and not isinstance(value, type)


def resolve_enum(value: Any) -> Any:
    """Return the backing value of an enum member, or value unchanged."""
    if isinstance(value, Enum):
        return value.value
    return value


def resolve_deferred(name: str, value: Any) -> Any:
    """Call a deferred value once.

    A deferred value that returns another callable is not called again: the
    result is treated as absent.
    """
    if not is_deferred(value):
        return value
    result = value()
    if is_deferred(result):
        logger.warning(
            "Deferred value for attribute '%s' returned a callable; attribute omitted",
            name,
        )
        return None
    return result


def normalize(name: str, raw: Any) -> RenderDecision:
    """Decide how the attribute ``name`` with value ``raw`` is rendered.

    Args:
        name: The attribute name (already prefixed, e.g. 'aria-label').
        raw: The stored attribute value.

    Returns:
        An Omit, BareFlag or KeyValue decision.
    """
    value = resolve_enum(resolve_deferred(name, raw))

    if value is None:
        return Omit(name)

    if isinstance(value, bool):
        if name in BOOLEAN_ATTRIBUTES:
            return BareFlag(name) if value else Omit(name)
        return KeyValue(name, "true" if value else "false", _quote_for(name))

    if isinstance(value, (dict, list, tuple)):
        return _normalize_container(name, value)

    if isinstance(value, (int, float)):
        return KeyValue(name, str(value), _quote_for(name))

    if not isinstance(value, str):
        value = str(value)

    if value == "":
        return Omit(name)

    return KeyValue(name, value, _quote_for(name))


def expand(name: str, raw: Any) -> list[tuple[str, Any]]:
    """Expand a ``data``/``aria`` container into prefixed attribute pairs.

    Any other name, or a non-dict value, is returned as a single pair.

    Example:
        >>> expand('data', {'id': '123', 'name': 'test'})
        [('data-id', '123'), ('data-name', 'test')]
    """
    if name in EXPANDED_KEYS and isinstance(raw, dict):
        return [(f"{name}-{resolve_enum(key)}", value) for key, value in raw.items()]
    return [(name, raw)]


def _quote_for(name: str) -> str:
    return SINGLE_QUOTE if name == "style" else DOUBLE_QUOTE


def _normalize_container(name: str, value: dict | list | tuple) -> RenderDecision:
    if name == "class" and isinstance(value, (list, tuple)):
        classes = " ".join(
            str(resolve_enum(item)) for item in value if resolve_enum(item) not in (None, "")
        )
        return KeyValue(name, classes) if classes else Omit(name)

    if name == "style" and isinstance(value, dict):
        declarations = " ".join(
            f"{prop}: {resolve_enum(css)};"
            for prop, css in value.items()
            if resolve_enum(css) not in (None, "")
        )
        return KeyValue(name, declarations, SINGLE_QUOTE) if declarations else Omit(name)

    return KeyValue(name, _to_json(value), SINGLE_QUOTE)


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return str(value)
