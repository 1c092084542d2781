# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fluent setters for the HTML global attributes.

Setters taking a value from a fixed set validate it against the matching
catalog in ``genro_htmltag.values`` and raise InvalidValueError otherwise.
Every setter accepts None to remove the attribute.

Reference: https://developer.mozilla.org/en-US/docs/Web/HTML/Reference/Global_attributes
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, TypeVar

from ..decorators import option
from ..exceptions import InvalidKeyError, InvalidValueError
from ..values import (
    AttributeProperty,
    ContentEditable,
    Direction,
    Draggable,
    Language,
    Role,
    Translate,
)

T = TypeVar("T")

ARIA_PREFIX = "aria-"
DATA_PREFIX = "data-"
EVENT_PREFIX = "on"

_BOOL_WORDS = {True: "true", False: "false"}


def _one_of(value: Any, allowed: Iterable[Any], attribute: str) -> None:
    """Raise InvalidValueError unless value (or its enum value) is in allowed."""
    if value is None:
        return
    resolved = value.value if isinstance(value, Enum) else value
    choices = [item.value if isinstance(item, Enum) else item for item in allowed]
    if resolved not in choices:
        raise InvalidValueError(
            f"Value '{resolved}' is not allowed for attribute '{attribute}', "
            f"expected one of: {', '.join(choices)}."
        )


def _is_tab_index(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= -1
    if isinstance(value, str):
        return value == "-1" or value.isdigit()
    return False


def _check_scalar(key: Any, value: Any, attribute: str) -> None:
    """Raise InvalidValueError if value is a container."""
    if isinstance(value, (Mapping, list, tuple, set)):
        raise InvalidValueError(
            f"Value for '{key}' in '{attribute}' must be a scalar, "
            f"got '{type(value).__name__}'."
        )


class GlobalAttributes:
    """Global attributes shared by every element kind.

    Requires HasAttributes in the same class.
    """

    @option()
    def accesskey(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.ACCESSKEY, value)

    @option()
    def autofocus(self: T, value: bool | None = True) -> T:
        return self.add_attribute(AttributeProperty.AUTOFOCUS, value)

    @option()
    def hidden(self: T, value: bool | None = True) -> T:
        return self.add_attribute(AttributeProperty.HIDDEN, value)

    @option("class")
    def class_(self: T, value: Any, override: bool = False) -> T:
        """Append CSS classes, or replace them when override is True.

        None removes the attribute; '' leaves it unchanged.

        Example:
            >>> Block.tag().class_('a').class_('b').render()
            '<div class="a b">\\n</div>'
        """
        new = self._clone()
        new._attributes.add_class(value, override)
        return new

    @option()
    def content_editable(self: T, value: Any) -> T:
        """Set contenteditable. Booleans map to 'true'/'false'."""
        if isinstance(value, bool):
            value = _BOOL_WORDS[value]
        _one_of(value, ContentEditable, "contenteditable")
        return self.add_attribute(AttributeProperty.CONTENTEDITABLE, value)

    @option()
    def dir(self: T, value: Any) -> T:
        _one_of(value, Direction, "dir")
        return self.add_attribute(AttributeProperty.DIR, value)

    @option()
    def draggable(self: T, value: Any) -> T:
        """Set draggable. Booleans map to 'true'/'false'."""
        if isinstance(value, bool):
            value = _BOOL_WORDS[value]
        _one_of(value, Draggable, "draggable")
        return self.add_attribute(AttributeProperty.DRAGGABLE, value)

    @option()
    def id(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.ID, value)

    @option()
    def lang(self: T, value: Any) -> T:
        _one_of(value, Language, "lang")
        return self.add_attribute(AttributeProperty.LANG, value)

    @option()
    def item_id(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.ITEMID, value)

    @option()
    def item_prop(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.ITEMPROP, value)

    @option()
    def item_ref(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.ITEMREF, value)

    @option()
    def item_scope(self: T, value: bool | None = True) -> T:
        return self.add_attribute(AttributeProperty.ITEMSCOPE, value)

    @option()
    def item_type(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.ITEMTYPE, value)

    @option()
    def role(self: T, value: Any) -> T:
        _one_of(value, Role, "role")
        return self.add_attribute(AttributeProperty.ROLE, value)

    @option()
    def spellcheck(self: T, value: Any) -> T:
        """Set spellcheck. Booleans map to 'true'/'false'."""
        if isinstance(value, bool):
            value = _BOOL_WORDS[value]
        _one_of(value, ("false", "true"), "spellcheck")
        return self.add_attribute("spellcheck", value)

    @option()
    def style(self: T, value: Any) -> T:
        """Set the style attribute from a string or a ``{property: value}`` dict.

        Style is always rendered with single quotes.
        """
        return self.add_attribute(AttributeProperty.STYLE, value)

    @option()
    def tab_index(self: T, value: Any) -> T:
        """Set tabindex.

        Raises:
            InvalidValueError: If value is not an integer-like value >= -1.
        """
        if value is not None and not _is_tab_index(value):
            raise InvalidValueError(
                f"Value '{value}' is not allowed for attribute 'tabindex', expected value >= -1."
            )
        return self.add_attribute(AttributeProperty.TABINDEX, value)

    @option()
    def title(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.TITLE, value)

    @option()
    def translate(self: T, value: Any) -> T:
        """Set translate. Booleans and 'true'/'false' map to 'yes'/'no'."""
        if isinstance(value, bool):
            value = "yes" if value else "no"
        elif value == "true":
            value = "yes"
        elif value == "false":
            value = "no"
        _one_of(value, Translate, "translate")
        return self.add_attribute(AttributeProperty.TRANSLATE, value)

    # ==================== aria-* ====================

    @option()
    def add_aria_attribute(self: T, key: Any, value: Any) -> T:
        """Set an aria attribute; 'label' and 'aria-label' name the same key.

        ``add_aria_attribute('describedby', True)`` renders as
        ``aria-describedby="{id}-help"`` when the element has an id.
        """
        return self._set_prefixed(key, value, ARIA_PREFIX)

    @option()
    def aria_attributes(self: T, values: Mapping[Any, Any]) -> T:
        """Set many aria attributes. Container values raise InvalidValueError."""
        new = self
        for key, value in values.items():
            _check_scalar(key, value, "aria_attributes")
            new = new._set_prefixed(key, value, ARIA_PREFIX)
        return new

    @option()
    def remove_aria_attribute(self: T, key: Any) -> T:
        return self._remove_prefixed(key, ARIA_PREFIX)

    # ==================== data-* ====================

    @option()
    def add_data_attribute(self: T, key: Any, value: Any) -> T:
        """Set a data attribute; 'id' and 'data-id' name the same key."""
        return self._set_prefixed(key, value, DATA_PREFIX)

    @option()
    def data_attributes(self: T, values: Mapping[Any, Any]) -> T:
        new = self
        for key, value in values.items():
            if not isinstance(key, (str, Enum)):
                raise InvalidKeyError(key)
            new = new._set_prefixed(key, value, DATA_PREFIX)
        return new

    @option()
    def remove_data_attribute(self: T, key: Any) -> T:
        return self._remove_prefixed(key, DATA_PREFIX)

    # ==================== on* events ====================

    @option()
    def add_event(self: T, event: Any, handler: Any) -> T:
        """Set an event handler; 'click' and 'onclick' name the same key."""
        return self._set_prefixed(event, handler, EVENT_PREFIX)

    @option()
    def events(self: T, values: Mapping[Any, Any]) -> T:
        new = self
        for key, value in values.items():
            _check_scalar(key, value, "events")
            new = new._set_prefixed(key, value, EVENT_PREFIX)
        return new

    @option()
    def remove_event(self: T, event: Any) -> T:
        return self._remove_prefixed(event, EVENT_PREFIX)
