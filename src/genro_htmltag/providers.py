# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Providers of option mappings applied to an existing tag.

A provider returns the same kind of mapping accepted by
``SimpleFactory.configure()``. Providers are applied after construction,
so they override registry and ``tag()`` defaults.

Example:
    >>> class CardDefaults(DefaultsProvider):
    ...     def get_defaults(self, tag):
    ...         return {'class': 'card'}
    >>> Block.tag().add_default_provider(CardDefaults).render()
    '<div class="card">\\n</div>'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .elements.base import BaseTag


class DefaultsProvider(ABC):
    """Supplies default options for a tag."""

    @abstractmethod
    def get_defaults(self, tag: BaseTag) -> dict[str, Any]:
        """Return the options to apply to tag ({} for none)."""


class ThemeProvider(ABC):
    """Supplies options for a tag under a named theme."""

    @abstractmethod
    def apply(self, tag: BaseTag, theme: str) -> dict[str, Any]:
        """Return the options to apply to tag for theme ({} for none)."""
