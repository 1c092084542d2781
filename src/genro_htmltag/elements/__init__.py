# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag classes - abstract bases and generic concrete elements."""

from .base import BaseTag
from .block import BaseBlock
from .generic import Block, Inline, Input, Void
from .inline import BaseInline
from .input import BaseInput
from .void import BaseVoid

__all__ = [
    'BaseTag',
    'BaseBlock',
    'BaseInline',
    'BaseVoid',
    'BaseInput',
    'Block',
    'Inline',
    'Void',
    'Input',
]
