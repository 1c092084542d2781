# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BaseInline - inline elements."""

from __future__ import annotations

from abc import abstractmethod

from ..context import RenderContext
from ..exceptions import UnsupportedOperationError
from ..html import Html
from ..mixins import (
    GlobalAttributes,
    HasAttributes,
    HasContent,
    HasPrefix,
    HasSuffix,
    HasTemplate,
)
from ..tags import InlineTag
from .base import BaseTag

INLINE_BEGIN_END = 'Inline elements cannot be used with begin/end syntax.'


class BaseInline(
    GlobalAttributes, HasContent, HasPrefix, HasSuffix, HasTemplate, HasAttributes, BaseTag
):
    """Base class for inline elements, rendered on a single line."""

    @abstractmethod
    def get_tag(self) -> InlineTag:
        """Return the tag rendered by this class."""

    def run(self) -> str:
        return self._compose(Html.inline(self.get_tag(), self.get_content(), self._attributes))

    def begin(self, context: RenderContext | None = None) -> str:
        raise UnsupportedOperationError(INLINE_BEGIN_END)

    @classmethod
    def end(cls, context: RenderContext | None = None) -> str:
        raise UnsupportedOperationError(INLINE_BEGIN_END)
