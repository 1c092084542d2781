# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML attribute renderer.

Turns an attribute mapping into the fragment that goes inside an opening tag.
Each attribute is normalized first, then escaped for its quote style.

Example:
    >>> render_attributes({'id': 'main', 'hidden': True})
    ' id="main" hidden'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .normalizer import (
    DOUBLE_QUOTE,
    BareFlag,
    KeyValue,
    expand,
    normalize,
    resolve_deferred,
    resolve_enum,
)

DESCRIBEDBY = "aria-describedby"
HELP_SUFFIX = "-help"


def encode_content(text: Any) -> str:
    """Escape ``&``, ``<`` and ``>`` for use as element content."""
    text = str(resolve_enum(text))
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_value(value: str, quote: str = DOUBLE_QUOTE) -> str:
    """Escape an attribute value for the given quote character.

    Apostrophes always become ``&apos;``. Double quotes become ``&quot;``
    only inside double-quoted values.
    """
    value = encode_content(value).replace("'", "&apos;")
    if quote == DOUBLE_QUOTE:
        value = value.replace('"', "&quot;")
    return value


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Render attributes as a space-prefixed string in mapping order.

    Args:
        attributes: An AttributeMap or any mapping of names to values.

    Returns:
        The rendered fragment, or '' if nothing is rendered.
    """
    if not attributes:
        return ""

    parts: list[str] = []
    for key, raw in attributes.items():
        for name, value in expand(key, resolve_deferred(key, raw)):
            if name == DESCRIBEDBY:
                value = _describedby(attributes, resolve_deferred(name, value))
            decision = normalize(name, value)
            if isinstance(decision, BareFlag):
                parts.append(f" {decision.name}")
            elif isinstance(decision, KeyValue):
                escaped = escape_value(decision.value, decision.quote)
                parts.append(f" {decision.name}={decision.quote}{escaped}{decision.quote}")
    return "".join(parts)


def _describedby(attributes: Mapping[str, Any], raw: Any) -> Any:
    """Compute ``{id}-help`` when aria-describedby resolves to true or "true"."""
    value = resolve_enum(raw)
    if value is True or value == "true":
        element_id = resolve_enum(resolve_deferred("id", attributes.get("id")))
        if element_id in (None, "", False):
            return None
        return f"{element_id}{HELP_SUFFIX}"
    return raw
