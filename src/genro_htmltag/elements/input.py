# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BaseInput - form input elements."""

from __future__ import annotations

from typing import Any, TypeVar

from ..decorators import option
from ..values import AttributeProperty
from .void import BaseVoid

T = TypeVar('T', bound='BaseInput')


class BaseInput(BaseVoid):
    """Base class for form controls rendered as void elements.

    Adds the ``name``, ``type``, ``disabled`` and ``form`` attributes.

    Example:
        >>> Input.tag().id('email').type('email').add_aria_attribute('describedby', True).render()
        '<input id="email" type="email" aria-describedby="email-help">'
    """

    @option()
    def name(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.NAME, value)

    @option()
    def type(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.TYPE, value)

    @option()
    def disabled(self: T, value: bool | None = True) -> T:
        return self.add_attribute(AttributeProperty.DISABLED, value)

    @option()
    def form(self: T, value: Any) -> T:
        return self.add_attribute(AttributeProperty.FORM, value)
