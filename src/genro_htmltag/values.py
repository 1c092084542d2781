# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value catalogs for global HTML attributes.

These enums are reference tables: setters accept either a member or its
string value, and the validators in ``mixins.global_attributes`` use them as
the allowed sets for ``dir``, ``lang``, ``role``, ``translate`` and friends.

References:
    - https://developer.mozilla.org/en-US/docs/Web/HTML/Reference/Global_attributes
    - https://www.w3.org/TR/wai-aria-1.2/
"""

from __future__ import annotations

from enum import Enum


class AttributeProperty(str, Enum):
    """HTML attribute names."""

    ACCEPT = "accept"
    ACCEPT_CHARSET = "accept-charset"
    ACCESSKEY = "accesskey"
    ACTION = "action"
    ALIGN = "align"
    ALLOW = "allow"
    ALT = "alt"
    ASYNC = "async"
    AUTOCAPITALIZE = "autocapitalize"
    AUTOCOMPLETE = "autocomplete"
    AUTOFOCUS = "autofocus"
    AUTOPLAY = "autoplay"
    BACKGROUND = "background"
    BGCOLOR = "bgcolor"
    BORDER = "border"
    CAPTURE = "capture"
    CHARSET = "charset"
    CHECKED = "checked"
    CITE = "cite"
    COLOR = "color"
    COLS = "cols"
    COLSPAN = "colspan"
    CONTENT = "content"
    CONTENTEDITABLE = "contenteditable"
    CONTROLS = "controls"
    COORDS = "coords"
    CROSSORIGIN = "crossorigin"
    CSS_CLASS = "class"
    DATETIME = "datetime"
    DECODING = "decoding"
    DEFER = "defer"
    DIR = "dir"
    DIRNAME = "dirname"
    DISABLED = "disabled"
    DOWNLOAD = "download"
    DRAGGABLE = "draggable"
    ENCTYPE = "enctype"
    ENTERKEYHINT = "enterkeyhint"
    FETCHPRIORITY = "fetchpriority"
    FOR = "for"
    FORM = "form"
    FORMACTION = "formaction"
    FORMENCTYPE = "formenctype"
    FORMMETHOD = "formmethod"
    FORMNOVALIDATE = "formnovalidate"
    FORMTARGET = "formtarget"
    HEADERS = "headers"
    HEIGHT = "height"
    HIDDEN = "hidden"
    HIGH = "high"
    HREF = "href"
    HREFLANG = "hreflang"
    HTTP_EQUIV = "http-equiv"
    ID = "id"
    INPUTMODE = "inputmode"
    INTEGRITY = "integrity"
    ISMAP = "ismap"
    ITEMPROP = "itemprop"
    KIND = "kind"
    LABEL = "label"
    LANG = "lang"
    LIST = "list"
    LOADING = "loading"
    LOOP = "loop"
    LOW = "low"
    MAX = "max"
    MAXLENGTH = "maxlength"
    MEDIA = "media"
    METHOD = "method"
    MIN = "min"
    MINLENGTH = "minlength"
    MULTIPLE = "multiple"
    MUTED = "muted"
    NAME = "name"
    NOVALIDATE = "novalidate"
    OPEN = "open"
    OPTIMUM = "optimum"
    PATTERN = "pattern"
    PING = "ping"
    PLACEHOLDER = "placeholder"
    PLAYSINLINE = "playsinline"
    POSTER = "poster"
    PRELOAD = "preload"
    READONLY = "readonly"
    REFERRERPOLICY = "referrerpolicy"
    REL = "rel"
    REQUIRED = "required"
    REVERSED = "reversed"
    ROLE = "role"
    ROWS = "rows"
    ROWSPAN = "rowspan"
    SANDBOX = "sandbox"
    SCOPE = "scope"
    SELECTED = "selected"
    SHAPE = "shape"
    SIZE = "size"
    SIZES = "sizes"
    SLOT = "slot"
    SPAN = "span"
    SPELLCHECK = "spellcheck"
    SRC = "src"
    SRCDOC = "srcdoc"
    SRCLANG = "srclang"
    SRCSET = "srcset"
    START = "start"
    STEP = "step"
    STYLE = "style"
    TABINDEX = "tabindex"
    TARGET = "target"
    TITLE = "title"
    TRANSLATE = "translate"
    TYPE = "type"
    USEMAP = "usemap"
    VALUE = "value"
    WIDTH = "width"
    WRAP = "wrap"
    ITEMID = "itemid"
    ITEMREF = "itemref"
    ITEMSCOPE = "itemscope"
    ITEMTYPE = "itemtype"


class Aria(str, Enum):
    """ARIA attribute names, without the ``aria-`` prefix."""

    ACTIVEDESCENDANT = "activedescendant"
    ATOMIC = "atomic"
    AUTOCOMPLETE = "autocomplete"
    BRAILLELABEL = "braillelabel"
    BRAILLEROLEDESCRIPTION = "brailleroledescription"
    BUSY = "busy"
    CHECKED = "checked"
    COLCOUNT = "colcount"
    COLINDEX = "colindex"
    COLINDEXTEXT = "colindextext"
    COLSPAN = "colspan"
    CONTROLS = "controls"
    CURRENT = "current"
    DESCRIBEDBY = "describedby"
    DESCRIPTION = "description"
    DETAILS = "details"
    DISABLED = "disabled"
    DROPEFFECT = "dropeffect"
    ERRORMESSAGE = "errormessage"
    EXPANDED = "expanded"
    FLOWTO = "flowto"
    GRABBED = "grabbed"
    HASPOPUP = "haspopup"
    HIDDEN = "hidden"
    INVALID = "invalid"
    KEYSHORTCUTS = "keyshortcuts"
    LABEL = "label"
    LABELLEDBY = "labelledby"
    LEVEL = "level"
    LIVE = "live"
    MODAL = "modal"
    MULTILINE = "multiline"
    MULTISELECTABLE = "multiselectable"
    ORIENTATION = "orientation"
    OWNS = "owns"
    PLACEHOLDER = "placeholder"
    POSINSET = "posinset"
    PRESSED = "pressed"
    READONLY = "readonly"
    RELEVANT = "relevant"
    REQUIRED = "required"
    ROLEDESCRIPTION = "roledescription"
    ROWCOUNT = "rowcount"
    ROWINDEX = "rowindex"
    ROWINDEXTEXT = "rowindextext"
    ROWSPAN = "rowspan"
    SELECTED = "selected"
    SETSIZE = "setsize"
    SORT = "sort"
    VALUEMAX = "valuemax"
    VALUEMIN = "valuemin"
    VALUENOW = "valuenow"
    VALUETEXT = "valuetext"


class DataProperty(str, Enum):
    """Common ``data-*`` attribute names, without the ``data-`` prefix."""

    ACTION = "action"
    CONFIRM = "confirm"
    CONTENT = "content"
    DISMISS = "dismiss"
    ID = "id"
    KEY = "key"
    METHOD = "method"
    NAME = "name"
    PARENT = "parent"
    PLACEMENT = "placement"
    TARGET = "target"
    TOGGLE = "toggle"
    TRIGGER = "trigger"
    URL = "url"
    VALUE = "value"


class Event(str, Enum):
    """DOM event handler attribute names."""

    ABORT = "onabort"
    ANIMATION_CANCEL = "onanimationcancel"
    ANIMATION_END = "onanimationend"
    ANIMATION_ITERATION = "onanimationiteration"
    ANIMATION_START = "onanimationstart"
    AUX_CLICK = "onauxclick"
    BEFORE_INPUT = "onbeforeinput"
    BEFORE_MATCH = "onbeforematch"
    BEFORE_TOGGLE = "onbeforetoggle"
    BLUR = "onblur"
    CAN_PLAY = "oncanplay"
    CAN_PLAY_THROUGH = "oncanplaythrough"
    CANCEL = "oncancel"
    CHANGE = "onchange"
    CLICK = "onclick"
    CLOSE = "onclose"
    COMMAND = "oncommand"
    CONTENT_VISIBILITY_AUTO_STATE_CHANGE = "oncontentvisibilityautostatechange"
    CONTEXT_LOST = "oncontextlost"
    CONTEXT_MENU = "oncontextmenu"
    CONTEXT_RESTORED = "oncontextrestored"
    COPY = "oncopy"
    CUE_CHANGE = "oncuechange"
    CUT = "oncut"
    DOUBLE_CLICK = "ondblclick"
    DRAG = "ondrag"
    DRAG_END = "ondragend"
    DRAG_ENTER = "ondragenter"
    DRAG_LEAVE = "ondragleave"
    DRAG_OVER = "ondragover"
    DRAG_START = "ondragstart"
    DROP = "ondrop"
    DURATION_CHANGE = "ondurationchange"
    EMPTIED = "onemptied"
    ENDED = "onended"
    ERROR = "onerror"
    FOCUS = "onfocus"
    FOCUS_IN = "onfocusin"
    FOCUS_OUT = "onfocusout"
    FORM_DATA = "onformdata"
    FULLSCREEN_CHANGE = "onfullscreenchange"
    FULLSCREEN_ERROR = "onfullscreenerror"
    GESTURE_CHANGE = "ongesturechange"
    GESTURE_END = "ongestureend"
    GESTURE_START = "ongesturestart"
    GOT_POINTER_CAPTURE = "ongotpointercapture"
    INPUT = "oninput"
    INVALID = "oninvalid"
    KEY_DOWN = "onkeydown"
    KEY_PRESS = "onkeypress"
    KEY_UP = "onkeyup"
    LOAD = "onload"
    LOAD_START = "onloadstart"
    LOADED_DATA = "onloadeddata"
    LOADED_METADATA = "onloadedmetadata"
    LOST_POINTER_CAPTURE = "onlostpointercapture"
    MOUSE_DOWN = "onmousedown"
    MOUSE_ENTER = "onmouseenter"
    MOUSE_LEAVE = "onmouseleave"
    MOUSE_MOVE = "onmousemove"
    MOUSE_OUT = "onmouseout"
    MOUSE_OVER = "onmouseover"
    MOUSE_UP = "onmouseup"
    MOUSE_WHEEL = "onmousewheel"
    PASTE = "onpaste"
    PAUSE = "onpause"
    PLAY = "onplay"
    PLAYING = "onplaying"
    POINTER_CANCEL = "onpointercancel"
    POINTER_DOWN = "onpointerdown"
    POINTER_ENTER = "onpointerenter"
    POINTER_LEAVE = "onpointerleave"
    POINTER_MOVE = "onpointermove"
    POINTER_OUT = "onpointerout"
    POINTER_OVER = "onpointerover"
    POINTER_RAW_UPDATE = "onpointerrawupdate"
    POINTER_UP = "onpointerup"
    PROGRESS = "onprogress"
    RATE_CHANGE = "onratechange"
    RESET = "onreset"
    RESIZE = "onresize"
    SCROLL = "onscroll"
    SCROLL_END = "onscrollend"
    SCROLL_SNAP_CHANGE = "onscrollsnapchange"
    SCROLL_SNAP_CHANGING = "onscrollsnapchanging"
    SECURITY_POLICY_VIOLATION = "onsecuritypolicyviolation"
    SEEKED = "onseeked"
    SEEKING = "onseeking"
    SELECT = "onselect"
    SELECT_START = "onselectstart"
    SELECTION_CHANGE = "onselectionchange"
    SLOT_CHANGE = "onslotchange"
    STALLED = "onstalled"
    SUBMIT = "onsubmit"
    SUSPEND = "onsuspend"
    TIME_UPDATE = "ontimeupdate"
    TOGGLE = "ontoggle"
    TOUCH_CANCEL = "ontouchcancel"
    TOUCH_END = "ontouchend"
    TOUCH_MOVE = "ontouchmove"
    TOUCH_START = "ontouchstart"
    TRANSITION_CANCEL = "ontransitioncancel"
    TRANSITION_END = "ontransitionend"
    TRANSITION_RUN = "ontransitionrun"
    TRANSITION_START = "ontransitionstart"
    VOLUME_CHANGE = "onvolumechange"
    WAITING = "onwaiting"
    WEBKIT_MOUSE_FORCE_CHANGED = "onwebkitmouseforcechanged"
    WEBKIT_MOUSE_FORCE_DOWN = "onwebkitmouseforcedown"
    WEBKIT_MOUSE_FORCE_UP = "onwebkitmouseforceup"
    WEBKIT_MOUSE_FORCE_WILL_BEGIN = "onwebkitmouseforcewillbegin"
    WHEEL = "onwheel"


class Direction(str, Enum):
    """Values of the ``dir`` attribute."""

    AUTO = "auto"
    LTR = "ltr"
    RTL = "rtl"


class Translate(str, Enum):
    """Values of the ``translate`` attribute."""

    NO = "no"
    YES = "yes"


class Draggable(str, Enum):
    """Values of the ``draggable`` attribute."""

    FALSE = "false"
    TRUE = "true"


class ContentEditable(str, Enum):
    """Values of the ``contenteditable`` attribute."""

    FALSE = "false"
    PLAINTEXT_ONLY = "plaintext-only"
    TRUE = "true"


class Language(str, Enum):
    """BCP 47 language tags accepted by the ``lang`` attribute."""

    ARABIC = "ar"
    BENGALI = "bn"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE = "zh"
    CHINESE_SIMPLIFIED = "zh-CN"
    CHINESE_TRADITIONAL = "zh-TW"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_UK = "en-GB"
    ENGLISH_US = "en-US"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt-BR"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SPANISH_LATIN_AMERICA = "es-419"
    SPANISH_SPAIN = "es-ES"
    SWEDISH = "sv"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"


class Role(str, Enum):
    """WAI-ARIA role values."""

    ALERT = "alert"
    ALERT_DIALOG = "alertdialog"
    APPLICATION = "application"
    ARTICLE = "article"
    ASSOCIATIONLIST = "associationlist"
    ASSOCIATIONLISTITEMKEY = "associationlistitemkey"
    ASSOCIATIONLISTITEMVALUE = "associationlistitemvalue"
    BANNER = "banner"
    BLOCKQUOTE = "blockquote"
    BUTTON = "button"
    CAPTION = "caption"
    CELL = "cell"
    CHECKBOX = "checkbox"
    CODE = "code"
    COLUMN_HEADER = "columnheader"
    COMBOBOX = "combobox"
    COMMAND = "command"
    COMMENT = "comment"
    COMPLEMENTARY = "complementary"
    COMPOSITE = "composite"
    CONTENTINFO = "contentinfo"
    DEFINITION = "definition"
    DELETION = "deletion"
    DIALOG = "dialog"
    DIRECTORY = "directory"
    DOCUMENT = "document"
    EMPHASIS = "emphasis"
    FEED = "feed"
    FIGURE = "figure"
    FORM = "form"
    GENERIC = "generic"
    GRID = "grid"
    GRIDCELL = "gridcell"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    INPUT = "input"
    INSERTION = "insertion"
    LANDMARK = "landmark"
    LINK = "link"
    LIST = "list"
    LISTBOX = "listbox"
    LISTITEM = "listitem"
    LOG = "log"
    MAIN = "main"
    MARK = "mark"
    MARQUEE = "marquee"
    MATH = "math"
    MENU = "menu"
    MENUBAR = "menubar"
    MENUITEM = "menuitem"
    MENUITEM_CHECKBOX = "menuitemcheckbox"
    MENUITEM_RADIO = "menuitemradio"
    METER = "meter"
    NAVIGATION = "navigation"
    NONE = "none"
    NOTE = "note"
    OPTION = "option"
    PARAGRAPH = "paragraph"
    PRESENTATION = "presentation"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    RADIOGROUP = "radiogroup"
    RANGE = "range"
    REGION = "region"
    ROLETYPE = "roletype"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SCROLLBAR = "scrollbar"
    SEARCH = "search"
    SEARCHBOX = "searchbox"
    SECTION = "section"
    SECTIONHEAD = "sectionhead"
    SELECT = "select"
    SEPARATOR = "separator"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    STRONG = "strong"
    STRUCTURE = "structure"
    SUBSCRIPT = "subscript"
    SUGGESTION = "suggestion"
    SUPERSCRIPT = "superscript"
    SWITCH = "switch"
    TAB = "tab"
    TABLIST = "tablist"
    TABPANEL = "tabpanel"
    TERM = "term"
    TEXTBOX = "textbox"
    TIME = "time"
    TIMER = "timer"
    TOOLBAR = "toolbar"
    TOOLTIP = "tooltip"
    TREE = "tree"
    TREEGRID = "treegrid"
    TREEITEM = "treeitem"
    WIDGET = "widget"
    WINDOW = "window"
