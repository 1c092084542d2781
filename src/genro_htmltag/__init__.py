# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlTag - Immutable HTML tag objects with fluent attribute setters.

A lightweight, zero-dependency library that renders HTML strings from
declarative tag objects, with begin()/end() streaming for nested blocks
(Genro Kyō).
"""

__version__ = "0.1.0"

from .attributes import AttributeMap, normalize_key
from .context import RenderContext, StackFrame, current_context, render_context
from .decorators import option
from .elements import (
    BaseBlock,
    BaseInline,
    BaseInput,
    BaseTag,
    BaseVoid,
    Block,
    Inline,
    Input,
    Void,
)
from .exceptions import (
    AbstractInstantiationError,
    ConfigurationError,
    HtmlTagError,
    InvalidKeyError,
    InvalidValueError,
    NoOpenBlockError,
    TagMismatchError,
    UnsupportedOperationError,
)
from .factory import SimpleFactory
from .html import Html
from .normalizer import BareFlag, KeyValue, Omit, normalize
from .providers import DefaultsProvider, ThemeProvider
from .renderer import encode_content, render_attributes
from .tags import BlockTag, InlineTag, ListTag, RootTag, TableTag, VoidTag, resolve_tag, tag_kind
from .template import DEFAULT_TEMPLATE, render_template

__all__ = [
    # Tags
    "BaseTag",
    "BaseBlock",
    "BaseInline",
    "BaseVoid",
    "BaseInput",
    "Block",
    "Inline",
    "Void",
    "Input",
    "option",
    # Factory and providers
    "SimpleFactory",
    "DefaultsProvider",
    "ThemeProvider",
    # begin/end stack
    "RenderContext",
    "StackFrame",
    "current_context",
    "render_context",
    # Rendering
    "AttributeMap",
    "normalize_key",
    "normalize",
    "Omit",
    "BareFlag",
    "KeyValue",
    "render_attributes",
    "encode_content",
    "Html",
    "render_template",
    "DEFAULT_TEMPLATE",
    # Tag catalogs
    "BlockTag",
    "InlineTag",
    "VoidTag",
    "ListTag",
    "RootTag",
    "TableTag",
    "tag_kind",
    "resolve_tag",
    # Exceptions
    "HtmlTagError",
    "InvalidKeyError",
    "InvalidValueError",
    "AbstractInstantiationError",
    "ConfigurationError",
    "NoOpenBlockError",
    "TagMismatchError",
    "UnsupportedOperationError",
]
