# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BaseBlock - block-level elements with begin()/end() support."""

from __future__ import annotations

import re
from abc import abstractmethod

from ..html import Html
from ..mixins import (
    GlobalAttributes,
    HasAttributes,
    HasContent,
    HasPrefix,
    HasSuffix,
    HasTemplate,
)
from ..tags import AnyTag
from .base import BaseTag

_REPEATED_NEWLINES = re.compile(r'\n{2,}')


class BaseBlock(
    GlobalAttributes, HasContent, HasPrefix, HasSuffix, HasTemplate, HasAttributes, BaseTag
):
    """Base class for block, list, root and table elements.

    Content is placed on its own line between the opening and closing tags.
    Repeated newlines in the output collapse to one.

    Example:
        >>> class Section(BaseBlock):
        ...     def get_tag(self):
        ...         return BlockTag.SECTION
        >>> Section.tag().content('Hi').render()
        '<section>\\nHi\\n</section>'
    """

    _block_capable = True

    @abstractmethod
    def get_tag(self) -> AnyTag:
        """Return the tag rendered by this class."""

    def after_run(self, result: str) -> str:
        return super().after_run(_REPEATED_NEWLINES.sub('\n', result))

    def run(self) -> str:
        if self._begin_executed:
            return Html.end(self.get_tag())
        element = Html.element(self.get_tag(), self.get_content(), self._attributes)
        return self._compose(element)

    def run_begin(self) -> str:
        return Html.begin(self.get_tag(), self._attributes)
