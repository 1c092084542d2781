# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlTag exceptions."""

from __future__ import annotations

from typing import Any


class HtmlTagError(Exception):
    """Base exception for HtmlTag errors."""

    pass


class InvalidKeyError(HtmlTagError):
    """Raised when an attribute key is empty or not a string."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Attribute key must be a non-empty string, got {key!r}.")


class InvalidValueError(HtmlTagError):
    """Raised when an attribute value is outside its allowed set."""

    pass


class AbstractInstantiationError(HtmlTagError):
    """Raised when the factory is asked to build an abstract tag class."""

    def __init__(self, cls: type) -> None:
        self.cls = cls
        super().__init__(
            f"Cannot instantiate abstract class '{cls.__qualname__}' via 'tag()' method."
        )


class ConfigurationError(HtmlTagError):
    """Raised when a defaults mapping names an unknown or private option."""

    pass


class NoOpenBlockError(HtmlTagError):
    """Raised when end() is called without a matching begin()."""

    def __init__(self, cls: type) -> None:
        self.cls = cls
        super().__init__(
            f"Unexpected '{cls.__qualname__}.end()' call, a matching 'begin()' is not found."
        )


class TagMismatchError(HtmlTagError):
    """Raised when end() is called on a class other than the open block's class."""

    def __init__(self, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Mismatched '{expected.__qualname__}.end()' call, got '{actual.__qualname__}'."
        )


class UnsupportedOperationError(HtmlTagError):
    """Raised when begin()/end() is used on a tag that cannot be a block."""

    pass
