# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BaseVoid - void elements."""

from __future__ import annotations

from abc import abstractmethod

from ..html import Html
from ..mixins import GlobalAttributes, HasAttributes, HasPrefix, HasSuffix, HasTemplate
from ..tags import VoidTag
from .base import BaseTag


class BaseVoid(GlobalAttributes, HasPrefix, HasSuffix, HasTemplate, HasAttributes, BaseTag):
    """Base class for void elements: no content, no closing tag."""

    @abstractmethod
    def get_tag(self) -> VoidTag:
        """Return the tag rendered by this class."""

    def run(self) -> str:
        return self._compose(Html.void(self.get_tag(), self._attributes))
