# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Html - stateless element rendering.

Low-level helpers used by the tag classes to produce opening tags, closing
tags and complete elements from a tag identity and an attribute mapping.

Example:
    >>> Html.element(BlockTag.DIV, 'Content', {'class': 'box'})
    '<div class="box">\\nContent\\n</div>'
    >>> Html.inline('span', 'Hi')
    '<span>Hi</span>'
    >>> Html.void(VoidTag.HR, {'id': 'sep'})
    '<hr id="sep">'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import UnsupportedOperationError
from .renderer import encode_content, render_attributes
from .tags import BLOCK_KINDS, resolve_tag, tag_kind


class Html:
    """Static HTML rendering functions."""

    @staticmethod
    def begin(tag: Any, attributes: Mapping[str, Any] | None = None) -> str:
        """Return the opening fragment of a block element, ending with a newline.

        Raises:
            UnsupportedOperationError: If the tag is inline or void.
        """
        name = _block_name(tag, "begin")
        return f"<{name}{render_attributes(attributes)}>\n"

    @staticmethod
    def end(tag: Any) -> str:
        """Return the closing fragment of a block element, starting with a newline.

        Raises:
            UnsupportedOperationError: If the tag is inline or void.
        """
        name = _block_name(tag, "end")
        return f"\n</{name}>"

    @staticmethod
    def element(
        tag: Any,
        content: Any = "",
        attributes: Mapping[str, Any] | None = None,
        encode: bool = False,
    ) -> str:
        """Render a complete element of any kind.

        Void tags ignore content. Block content is placed on its own line.
        """
        resolved = resolve_tag(tag)
        kind = tag_kind(resolved)
        if kind == "void":
            return Html.void(resolved, attributes)
        if kind == "inline":
            return Html.inline(resolved, content, attributes, encode)

        text = _content(content, encode)
        attrs = render_attributes(attributes)
        if text == "":
            return f"<{resolved.value}{attrs}>\n</{resolved.value}>"
        return f"<{resolved.value}{attrs}>\n{text}\n</{resolved.value}>"

    @staticmethod
    def inline(
        tag: Any,
        content: Any = "",
        attributes: Mapping[str, Any] | None = None,
        encode: bool = False,
    ) -> str:
        """Render an inline element with its content on the same line."""
        name = resolve_tag(tag, "inline").value
        return f"<{name}{render_attributes(attributes)}>{_content(content, encode)}</{name}>"

    @staticmethod
    def void(tag: Any, attributes: Mapping[str, Any] | None = None) -> str:
        """Render a void element, which has no closing tag."""
        name = resolve_tag(tag, "void").value
        return f"<{name}{render_attributes(attributes)}>"


def _block_name(tag: Any, operation: str) -> str:
    resolved = resolve_tag(tag)
    if not isinstance(resolved, BLOCK_KINDS):
        raise UnsupportedOperationError(
            f"Tag '{resolved.value}' does not support '{operation}()' method."
        )
    return resolved.value


def _content(content: Any, encode: bool) -> str:
    if content is None:
        return ""
    return encode_content(content) if encode else str(content)
