# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared stub tags and fixtures."""

import pytest

from genro_htmltag import (
    BaseBlock,
    BaseInline,
    BaseInput,
    BaseVoid,
    BlockTag,
    InlineTag,
    ListTag,
    SimpleFactory,
    VoidTag,
    render_context,
)


class TagBlock(BaseBlock):
    """A <div> block."""

    def get_tag(self):
        return BlockTag.DIV


class TagList(BaseBlock):
    """A <ul> block."""

    def get_tag(self):
        return ListTag.UL


class TagInline(BaseInline):
    """A <span> inline element."""

    def get_tag(self):
        return InlineTag.SPAN


class TagVoid(BaseVoid):
    """An <hr> void element."""

    def get_tag(self):
        return VoidTag.HR


class TagInput(BaseInput):
    """An <input> element with a label property."""

    public_properties = ('label',)
    label = ''

    def get_tag(self):
        return VoidTag.INPUT


@pytest.fixture(autouse=True)
def fresh_context():
    """Run each test with its own begin/end stack."""
    with render_context() as context:
        yield context


@pytest.fixture(autouse=True)
def defaults_registry():
    """Restore the defaults registry after each test."""
    saved = SimpleFactory.get_registry()
    yield
    SimpleFactory.set_registry(saved)
