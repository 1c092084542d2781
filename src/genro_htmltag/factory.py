# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SimpleFactory - construction and configuration of tags.

Configuration mappings name options declared with ``@option`` (or names
listed in the class ``public_properties``). A list or tuple value is spread
as positional arguments, anything else is passed as a single argument::

    {'class': 'box'}               ->  tag.class_('box')
    {'class': ['box', True]}       ->  tag.class_('box', True)
    {'attributes': {'x': '1'}}     ->  tag.attributes({'x': '1'})

The defaults registry is process-wide. Tests that change it should save
and restore it (see ``get_registry()``/``reset_defaults()``).
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from .exceptions import AbstractInstantiationError, ConfigurationError

if TYPE_CHECKING:
    from .elements.base import BaseTag

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="BaseTag")


class SimpleFactory:
    """Creates tags and applies option mappings to them."""

    # Registry of defaults keyed by tag class
    _defaults: dict[type, dict[str, Any]] = {}

    @staticmethod
    def create(cls: type[T]) -> T:
        """Return a blank instance of cls.

        Raises:
            AbstractInstantiationError: If cls is abstract.
        """
        if inspect.isabstract(cls):
            raise AbstractInstantiationError(cls)
        return cls()

    @staticmethod
    def configure(tag: T, definitions: Mapping[str, Any]) -> T:
        """Apply an option mapping to tag and return the resulting tag.

        Args:
            tag: The tag to configure. It is not modified.
            definitions: Mapping of option name to value.

        Returns:
            A new tag with every option applied in mapping order.

        Raises:
            ConfigurationError: If a name is private or not an option.
        """
        for key, value in definitions.items():
            name = str(key)
            if name.startswith("_"):
                raise ConfigurationError(
                    f"Option '{name}' of '{type(tag).__qualname__}' is private."
                )

            method_name = type(tag)._options.get(name)
            if method_name is not None:
                args = value if isinstance(value, (list, tuple)) else (value,)
                tag = getattr(tag, method_name)(*args)
            elif name in type(tag).public_properties:
                tag = tag._with_property(name, value)
            else:
                raise ConfigurationError(
                    f"'{type(tag).__qualname__}' has no option '{name}'."
                )
            logger.debug("configured %s.%s", type(tag).__qualname__, name)
        return tag

    @classmethod
    def get_defaults(cls, tag_class: type) -> dict[str, Any]:
        """Return the registry defaults of tag_class ({} if none)."""
        return dict(cls._defaults.get(tag_class, {}))

    @classmethod
    def set_defaults(cls, tag_class: type, defaults: Mapping[str, Any]) -> None:
        """Replace the registry defaults of tag_class."""
        cls._defaults[tag_class] = dict(defaults)

    @classmethod
    def reset_defaults(cls, tag_class: type | None = None) -> None:
        """Clear the registry, or only the entry of tag_class."""
        if tag_class is None:
            cls._defaults.clear()
        else:
            cls._defaults.pop(tag_class, None)

    @classmethod
    def get_registry(cls) -> dict[type, dict[str, Any]]:
        """Return a copy of the whole registry."""
        return {key: dict(value) for key, value in cls._defaults.items()}

    @classmethod
    def set_registry(cls, registry: Mapping[type, Mapping[str, Any]]) -> None:
        """Replace the whole registry, e.g. with a copy from get_registry()."""
        cls._defaults = {key: dict(value) for key, value in registry.items()}
