# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Mixins composing the fluent API of the tag classes."""

from .core import HasAttributes, HasContent, HasPrefix, HasSuffix, HasTemplate
from .global_attributes import GlobalAttributes

__all__ = [
    "GlobalAttributes",
    "HasAttributes",
    "HasContent",
    "HasPrefix",
    "HasSuffix",
    "HasTemplate",
]
