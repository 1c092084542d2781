# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BaseTag - Abstract base class for immutable HTML tags."""

from __future__ import annotations

import copy
from abc import abstractmethod
from typing import Any, TypeVar

from ..attributes import AttributeMap
from ..context import RenderContext, current_context
from ..exceptions import UnsupportedOperationError
from ..factory import SimpleFactory
from ..providers import DefaultsProvider, ThemeProvider

T = TypeVar("T", bound="BaseTag")


class BaseTag(DefaultsProvider, ThemeProvider):
    """Abstract base class for HTML tags.

    A tag is immutable: every fluent method returns a new instance and
    leaves the receiver untouched. Subclasses implement ``run()`` and mark
    their fluent setters with ``@option`` so that the factory, the defaults
    registry and the providers can call them by name.

    The class automatically builds an ``_options`` dict mapping option names
    to method names via __init_subclass__, scanning the whole MRO so that
    options declared on mixins are included.

    Usage:
        >>> tag = Block.tag({'class': 'box'}).id('main')
        >>> tag.render()
        '<div class="box" id="main">\\n</div>'
        >>> Block.tag().begin() + 'X' + Block.end()
        '<div>\\nX\\n</div>'
    """

    # Class-level dict mapping option name -> method name
    _options: dict[str, str] = {}

    # Plain instance attributes settable by the factory
    public_properties: tuple[str, ...] = ()

    # True for tags that support begin()/end()
    _block_capable: bool = False

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _options dict from @option decorated methods."""
        super().__init_subclass__(**kwargs)

        cls._options = {}
        for klass in reversed(cls.__mro__):
            for name, method in vars(klass).items():
                if name.startswith("_") or not callable(method):
                    continue
                option_name = getattr(method, "_option_name", None)
                if option_name is not None:
                    cls._options[option_name] = name

    def __init__(self) -> None:
        super().__init__()
        self._begin_executed = False

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} {self.render()!r}>"

    # ==================== Construction ====================

    @classmethod
    def tag(cls: type[T], *defaults: dict[str, Any]) -> T:
        """Create a configured instance.

        Options are applied in order: ``load_default()``, the registry
        defaults of the class, then each mapping in ``defaults``. Later
        values win.

        Raises:
            AbstractInstantiationError: If the class is abstract.
            ConfigurationError: If a mapping names an unknown option.
        """
        tag = SimpleFactory.create(cls)
        pipeline = [tag.load_default(), SimpleFactory.get_defaults(cls), *defaults]
        for definitions in pipeline:
            if definitions:
                tag = SimpleFactory.configure(tag, definitions)
        return tag

    def load_default(self) -> dict[str, Any]:
        """Class-level default options (lowest precedence)."""
        return {}

    def _clone(self: T) -> T:
        new = copy.copy(self)
        for name, value in vars(self).items():
            if isinstance(value, (AttributeMap, dict)):
                setattr(new, name, value.copy())
        return new

    def _with_property(self: T, name: str, value: Any) -> T:
        new = self._clone()
        setattr(new, name, value)
        return new

    # ==================== Providers ====================

    def get_defaults(self, tag: BaseTag) -> dict[str, Any]:
        return {}

    def apply(self, tag: BaseTag, theme: str) -> dict[str, Any]:
        return {}

    def add_default_provider(self: T, *providers: Any) -> T:
        """Apply the options of one or more DefaultsProvider classes or instances."""
        tag = self
        for provider in providers:
            if isinstance(provider, type):
                provider = provider()
            definitions = provider.get_defaults(tag)
            if definitions:
                tag = SimpleFactory.configure(tag, definitions)
        return tag

    def add_theme_provider(self: T, theme: str, *providers: Any) -> T:
        """Apply the options of one or more ThemeProvider classes or instances for theme."""
        tag = self
        for provider in providers:
            if isinstance(provider, type):
                provider = provider()
            definitions = provider.apply(tag, theme)
            if definitions:
                tag = SimpleFactory.configure(tag, definitions)
        return tag

    # ==================== Rendering ====================

    @abstractmethod
    def run(self) -> str:
        """Produce the markup of the tag."""

    def before_run(self) -> bool:
        """Hook called before rendering. Returning False renders ''."""
        return True

    def after_run(self, result: str) -> str:
        """Hook called with the rendered markup; returns the final markup."""
        return result

    def render(self) -> str:
        """Render the tag to an HTML string."""
        if self.before_run() is False:
            return ""
        return self.after_run(self.run())

    def run_begin(self) -> str:
        """Produce the opening fragment for begin()."""
        raise UnsupportedOperationError(
            f"Tag '{type(self).__qualname__}' does not support 'begin()' method."
        )

    # ==================== begin/end ====================

    def begin(self, context: RenderContext | None = None) -> str:
        """Open a block and return its opening fragment.

        The content between begin() and the matching end() is written by the
        caller.

        Args:
            context: Stack to use. Defaults to current_context().

        Raises:
            UnsupportedOperationError: If the tag cannot be a block.
        """
        if not self._block_capable:
            raise UnsupportedOperationError(
                f"Tag '{type(self).__qualname__}' does not support 'begin()' method."
            )
        fragment = self.run_begin()
        opened = self._clone()
        opened._begin_executed = True
        (context if context is not None else current_context()).push(opened)
        return fragment

    @classmethod
    def end(cls, context: RenderContext | None = None) -> str:
        """Close the innermost block, which must have been opened by cls.

        Raises:
            UnsupportedOperationError: If cls cannot be a block.
            NoOpenBlockError: If no block is open.
            TagMismatchError: If the innermost block belongs to another class.
        """
        if not cls._block_capable:
            raise UnsupportedOperationError(
                f"Tag '{cls.__qualname__}' does not support 'end()' method."
            )
        frame = (context if context is not None else current_context()).pop(cls)
        return frame.tag.render()
