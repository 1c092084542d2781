# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Generic concrete elements: Block, Inline, Void and Input.

Each renders a default tag and, except Input, can switch to another tag of
the same kind with ``tag_name()``.

Example:
    >>> Block.tag().tag_name('section').content('Hi').render()
    '<section>\\nHi\\n</section>'
    >>> Inline.tag({'class': 'badge'}).content('new').render()
    '<span class="badge">new</span>'
    >>> Void.tag().render()
    '<hr>'
"""

from __future__ import annotations

from typing import Any, TypeVar

from ..decorators import option
from ..tags import AnyTag, BlockTag, InlineTag, VoidTag, resolve_tag
from .block import BaseBlock
from .inline import BaseInline
from .input import BaseInput
from .void import BaseVoid

T = TypeVar('T')


class _TagName:
    """Selectable tag name, restricted to one rendering kind."""

    _kind: str
    _default_tag: AnyTag

    def __init__(self) -> None:
        super().__init__()
        self._tag_name = self._default_tag

    @option()
    def tag_name(self: T, value: Any) -> T:
        """Render another tag of the same kind.

        Raises:
            InvalidValueError: If value is empty or a tag of another kind.
        """
        new = self._clone()
        new._tag_name = resolve_tag(value, self._kind)
        return new

    def get_tag(self) -> Any:
        return self._tag_name


class Block(_TagName, BaseBlock):
    """A block element, ``<div>`` by default."""

    _kind = 'block'
    _default_tag = BlockTag.DIV


class Inline(_TagName, BaseInline):
    """An inline element, ``<span>`` by default."""

    _kind = 'inline'
    _default_tag = InlineTag.SPAN


class Void(_TagName, BaseVoid):
    """A void element, ``<hr>`` by default."""

    _kind = 'void'
    _default_tag = VoidTag.HR


class Input(BaseInput):
    """An ``<input>`` element."""

    def get_tag(self) -> VoidTag:
        return VoidTag.INPUT
