# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorators marking tag methods as configuration options."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable


def option(name: str | None = None) -> Callable:
    """Declare a fluent tag method as a configuration option.

    Options are the keys accepted by ``SimpleFactory.configure()``, by the
    defaults registry, by ``load_default()`` and by providers. The method
    name is the option name unless ``name`` is given, which is needed when
    the HTML name is a Python keyword.

    Args:
        name: Option name. Defaults to the method name.

    Example:
        >>> class MyTag(BaseBlock):
        ...     @option('class')
        ...     def class_(self, value, override=False):
        ...         ...
        ...
        ...     @option()
        ...     def title(self, value):
        ...         ...
        >>> MyTag.tag({'class': 'box', 'title': 'Main'})
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return func(*args, **kwargs)

        wrapper._option_name = name or func.__name__

        return wrapper

    return decorator
