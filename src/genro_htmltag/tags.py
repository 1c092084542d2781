# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML tag catalogs grouped by rendering kind.

Block-like tags (block, list, root and table) render with newlines around
their content and support ``begin()``/``end()`` streaming. Inline tags render
content on a single line. Void tags never carry content or a closing tag.

References:
    - https://developer.mozilla.org/en-US/docs/Glossary/Block-level_content
    - https://developer.mozilla.org/en-US/docs/Glossary/Inline-level_content
    - https://developer.mozilla.org/en-US/docs/Glossary/Void_element
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .exceptions import InvalidValueError


class BlockTag(str, Enum):
    """Block-level tags."""

    ADDRESS = "address"
    ARTICLE = "article"
    ASIDE = "aside"
    AUDIO = "audio"
    BLOCKQUOTE = "blockquote"
    CANVAS = "canvas"
    DEL = "del"
    DETAILS = "details"
    DIALOG = "dialog"
    DIV = "div"
    FIELDSET = "fieldset"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    FOOTER = "footer"
    FORM = "form"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    HEADER = "header"
    HGROUP = "hgroup"
    IFRAME = "iframe"
    INS = "ins"
    LEGEND = "legend"
    MAIN = "main"
    MENU = "menu"
    NAV = "nav"
    OBJECT = "object"
    P = "p"
    PRE = "pre"
    SEARCH = "search"
    SECTION = "section"
    SUMMARY = "summary"
    VIDEO = "video"


class InlineTag(str, Enum):
    """Inline-level tags."""

    A = "a"
    ABBR = "abbr"
    B = "b"
    BDI = "bdi"
    BDO = "bdo"
    BUTTON = "button"
    CITE = "cite"
    CODE = "code"
    DATA = "data"
    DFN = "dfn"
    EM = "em"
    I = "i"
    KBD = "kbd"
    LABEL = "label"
    MAP = "map"
    MARK = "mark"
    METER = "meter"
    OUTPUT = "output"
    PICTURE = "picture"
    PROGRESS = "progress"
    Q = "q"
    RP = "rp"
    RT = "rt"
    RUBY = "ruby"
    S = "s"
    SAMP = "samp"
    SMALL = "small"
    SPAN = "span"
    STRONG = "strong"
    SUB = "sub"
    SUP = "sup"
    TIME = "time"
    U = "u"
    VAR = "var"


class VoidTag(str, Enum):
    """Void (self-closing) tags."""

    AREA = "area"
    BASE = "base"
    BR = "br"
    COL = "col"
    EMBED = "embed"
    HR = "hr"
    IMG = "img"
    INPUT = "input"
    LINK = "link"
    META = "meta"
    SOURCE = "source"
    TRACK = "track"
    WBR = "wbr"


class ListTag(str, Enum):
    """List tags."""

    DD = "dd"
    DL = "dl"
    DT = "dt"
    LI = "li"
    OL = "ol"
    UL = "ul"


class RootTag(str, Enum):
    """Document root tags."""

    BODY = "body"
    HEAD = "head"
    HTML = "html"


class TableTag(str, Enum):
    """Table tags."""

    CAPTION = "caption"
    COLGROUP = "colgroup"
    TABLE = "table"
    TBODY = "tbody"
    TD = "td"
    TFOOT = "tfoot"
    TH = "th"
    THEAD = "thead"
    TR = "tr"


AnyTag = Union[BlockTag, InlineTag, VoidTag, ListTag, RootTag, TableTag]

BLOCK_KINDS: tuple[type[Enum], ...] = (BlockTag, ListTag, RootTag, TableTag)

_KINDS: dict[str, tuple[type[Enum], ...]] = {
    "block": BLOCK_KINDS,
    "inline": (InlineTag,),
    "void": (VoidTag,),
}


def tag_kind(tag: AnyTag) -> str:
    """Return the rendering kind of a tag: 'block', 'inline' or 'void'."""
    for kind, enums in _KINDS.items():
        if isinstance(tag, enums):
            return kind
    raise InvalidValueError(f"'{tag!r}' is not a known HTML tag.")


def resolve_tag(value: AnyTag | str, *kinds: str) -> AnyTag:
    """Resolve a tag name or member to a tag member of one of the given kinds.

    Args:
        value: A tag enum member or a tag name such as 'section'.
        *kinds: Accepted kinds ('block', 'inline', 'void'). All if omitted.

    Returns:
        The matching tag enum member.

    Raises:
        InvalidValueError: If the name is empty or not a tag of those kinds.

    Example:
        >>> resolve_tag('ul', 'block')
        <ListTag.UL: 'ul'>
    """
    kinds = kinds or tuple(_KINDS)
    enums = tuple(e for kind in kinds for e in _KINDS[kind])

    if isinstance(value, Enum):
        if isinstance(value, enums):
            return value
        raise InvalidValueError(
            f"Tag '{value.value}' is not a {' or '.join(kinds)} tag."
        )

    if not value:
        raise InvalidValueError("Tag name cannot be empty.")

    name = value.lower()
    for enum_cls in enums:
        try:
            return enum_cls(name)
        except ValueError:
            continue

    raise InvalidValueError(f"Tag '{value}' is not a {' or '.join(kinds)} tag.")
