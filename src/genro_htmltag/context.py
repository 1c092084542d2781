# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""RenderContext - the begin()/end() stack of open block tags.

Each ``begin()`` pushes a frame holding the tag class and the tag snapshot
that opened the block; the matching ``end()`` pops it. The content between
the two calls is written by the caller and never buffered here.

The active context lives in a ``ContextVar``: code running in a fresh
thread or asyncio task starts with its own empty stack.

Example:
    >>> with render_context() as ctx:
    ...     html = Block.tag().begin() + 'X' + Block.end()
    ...     ctx.is_idle
    True
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from .exceptions import NoOpenBlockError, TagMismatchError

if TYPE_CHECKING:
    from .elements.base import BaseTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackFrame:
    """An open block: the class that opened it and the tag snapshot."""

    tag_class: type
    tag: BaseTag


class RenderContext:
    """LIFO stack of open block tags."""

    def __init__(self) -> None:
        self._frames: list[StackFrame] = []

    def __repr__(self) -> str:
        names = [frame.tag_class.__qualname__ for frame in self._frames]
        return f"RenderContext({names!r})"

    @property
    def depth(self) -> int:
        """Number of open blocks."""
        return len(self._frames)

    @property
    def is_idle(self) -> bool:
        """True if no block is open."""
        return not self._frames

    def push(self, tag: BaseTag) -> StackFrame:
        """Open a block for tag and return its frame."""
        frame = StackFrame(type(tag), tag)
        self._frames.append(frame)
        logger.debug("begin %s (depth %d)", frame.tag_class.__qualname__, self.depth)
        return frame

    def pop(self, tag_class: type) -> StackFrame:
        """Close the innermost block, which must belong to tag_class.

        Raises:
            NoOpenBlockError: If no block is open.
            TagMismatchError: If the innermost block was opened by another
                class. The frame is discarded anyway.
        """
        if not self._frames:
            raise NoOpenBlockError(tag_class)

        frame = self._frames.pop()
        logger.debug("end %s (depth %d)", tag_class.__qualname__, self.depth)
        if frame.tag_class is not tag_class:
            raise TagMismatchError(frame.tag_class, tag_class)
        return frame

    def peek(self) -> StackFrame | None:
        """Return the innermost open frame, or None."""
        return self._frames[-1] if self._frames else None

    def clear(self) -> None:
        """Discard every open frame."""
        self._frames.clear()


_current: ContextVar[RenderContext | None] = ContextVar("render_context", default=None)


def current_context() -> RenderContext:
    """Return the RenderContext of the running execution context.

    A new one is created on first use.
    """
    context = _current.get()
    if context is None:
        context = RenderContext()
        _current.set(context)
    return context


@contextmanager
def render_context(context: RenderContext | None = None) -> Iterator[RenderContext]:
    """Make context (or a new RenderContext) current inside a with block.

    The previous context is restored on exit.
    """
    if context is None:
        context = RenderContext()
    token = _current.set(context)
    try:
        yield context
    finally:
        _current.reset(token)
