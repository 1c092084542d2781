# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Core tag mixins: attributes, content, prefix/suffix and template.

Each mixin keeps its own state, initialized in a cooperative ``__init__``,
and every fluent method works on a clone (``self._clone()`` is provided by
BaseTag).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from ..attributes import AttributeMap, normalize_key
from ..decorators import option
from ..html import Html
from ..renderer import encode_content
from ..tags import resolve_tag
from ..template import render_template

T = TypeVar("T")


class HasAttributes:
    """Generic attribute access."""

    def __init__(self) -> None:
        super().__init__()
        self._attributes = AttributeMap()

    @option()
    def add_attribute(self: T, key: Any, value: Any) -> T:
        """Set one attribute. None removes it.

        Raises:
            InvalidKeyError: If key is empty or not a string.
        """
        new = self._clone()
        new._attributes.set(key, value)
        return new

    @option()
    def attributes(self: T, values: Mapping[Any, Any]) -> T:
        """Merge a mapping of attributes, in order. None values remove keys."""
        new = self._clone()
        new._attributes.set_many(values)
        return new

    @option()
    def remove_attribute(self: T, key: Any) -> T:
        new = self._clone()
        new._attributes.remove(key)
        return new

    def get_attribute(self, key: Any, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def get_attributes(self) -> AttributeMap:
        """Return a copy of the attribute map."""
        return self._attributes.copy()

    def _set_prefixed(self: T, key: Any, value: Any, prefix: str) -> T:
        new = self._clone()
        new._attributes.set(normalize_key(key, prefix), value)
        return new

    def _remove_prefixed(self: T, key: Any, prefix: str) -> T:
        new = self._clone()
        new._attributes.remove(normalize_key(key, prefix))
        return new


class HasContent:
    """Inner content. ``content()`` encodes, ``html()`` appends raw markup."""

    def __init__(self) -> None:
        super().__init__()
        self._content = ""

    @option()
    def content(self: T, *values: Any) -> T:
        new = self._clone()
        new._content += "".join(encode_content(value) for value in values)
        return new

    @option()
    def html(self: T, *values: Any) -> T:
        new = self._clone()
        new._content += "".join(str(value) for value in values)
        return new

    def get_content(self) -> str:
        return self._content


class _Decoration:
    """Content rendered before or after the element, optionally wrapped."""

    @staticmethod
    def _render_decoration(content: str, tag: Any, attributes: AttributeMap) -> str:
        if content == "" or tag is False:
            return content
        return Html.element(tag, content, attributes)


class HasPrefix(_Decoration):
    """Prefix content with its own attributes and optional wrapping tag."""

    def __init__(self) -> None:
        super().__init__()
        self._prefix = ""
        self._prefix_attributes = AttributeMap()
        self._prefix_tag: Any = False

    @option()
    def prefix(self: T, *values: Any) -> T:
        """Replace the prefix with the concatenation of values."""
        new = self._clone()
        new._prefix = "".join(str(value) for value in values)
        return new

    @option()
    def prefix_attributes(self: T, values: Mapping[Any, Any]) -> T:
        """Replace the attributes of the prefix wrapping tag."""
        new = self._clone()
        new._prefix_attributes = AttributeMap(values)
        return new

    @option()
    def prefix_class(self: T, value: Any, override: bool = False) -> T:
        new = self._clone()
        new._prefix_attributes.add_class(value, override)
        return new

    @option()
    def prefix_tag(self: T, value: Any = False) -> T:
        """Set the tag wrapping the prefix. False or None renders it raw."""
        new = self._clone()
        new._prefix_tag = False if value in (False, None) else resolve_tag(value)
        return new

    def get_prefix(self) -> str:
        return self._prefix

    def get_prefix_attributes(self) -> AttributeMap:
        return self._prefix_attributes.copy()

    def get_prefix_tag(self) -> Any:
        return self._prefix_tag

    def _render_prefix(self) -> str:
        return self._render_decoration(self._prefix, self._prefix_tag, self._prefix_attributes)


class HasSuffix(_Decoration):
    """Suffix content with its own attributes and optional wrapping tag."""

    def __init__(self) -> None:
        super().__init__()
        self._suffix = ""
        self._suffix_attributes = AttributeMap()
        self._suffix_tag: Any = False

    @option()
    def suffix(self: T, *values: Any) -> T:
        """Replace the suffix with the concatenation of values."""
        new = self._clone()
        new._suffix = "".join(str(value) for value in values)
        return new

    @option()
    def suffix_attributes(self: T, values: Mapping[Any, Any]) -> T:
        """Replace the attributes of the suffix wrapping tag."""
        new = self._clone()
        new._suffix_attributes = AttributeMap(values)
        return new

    @option()
    def suffix_class(self: T, value: Any, override: bool = False) -> T:
        new = self._clone()
        new._suffix_attributes.add_class(value, override)
        return new

    @option()
    def suffix_tag(self: T, value: Any = False) -> T:
        """Set the tag wrapping the suffix. False or None renders it raw."""
        new = self._clone()
        new._suffix_tag = False if value in (False, None) else resolve_tag(value)
        return new

    def get_suffix(self) -> str:
        return self._suffix

    def get_suffix_attributes(self) -> AttributeMap:
        return self._suffix_attributes.copy()

    def get_suffix_tag(self) -> Any:
        return self._suffix_tag

    def _render_suffix(self) -> str:
        return self._render_decoration(self._suffix, self._suffix_tag, self._suffix_attributes)


class HasTemplate:
    """Template composing ``{prefix}``, ``{tag}``, ``{suffix}`` and custom tokens."""

    def __init__(self) -> None:
        super().__init__()
        self._template = ""
        self._token_values: dict[str, str] = {}

    @option()
    def template(self: T, value: str) -> T:
        """Set the template. '' means the default '{prefix}\\n{tag}\\n{suffix}'."""
        new = self._clone()
        new._template = value
        return new

    @option()
    def token_values(self: T, values: Mapping[str, Any]) -> T:
        """Add custom tokens, e.g. ``{'{icon}': '<i></i>'}``."""
        new = self._clone()
        new._token_values.update({token: str(value) for token, value in values.items()})
        return new

    def get_template(self) -> str:
        return self._template

    def get_token_values(self) -> dict[str, str]:
        return dict(self._token_values)

    def _compose(self, element: str) -> str:
        tokens = {
            "{prefix}": self._render_prefix(),
            "{tag}": element,
            "{suffix}": self._render_suffix(),
        }
        # Built-in tokens take precedence over custom ones
        for token, value in self._token_values.items():
            tokens.setdefault(token, value)
        return render_template(self._template, tokens)
