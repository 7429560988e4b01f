"""Terminal style tokens and the style resolver."""

from enum import Enum
from typing import Iterable


class StyleToken(str, Enum):
    """One terminal visual attribute."""

    RESET = "reset"
    BRIGHT = "bright"
    DIM = "dim"
    UNDERSCORE = "underscore"
    BLINK = "blink"
    REVERSE = "reverse"
    HIDDEN = "hidden"

    FOREGROUND_BLACK = "foreground_black"
    FOREGROUND_RED = "foreground_red"
    FOREGROUND_GREEN = "foreground_green"
    FOREGROUND_YELLOW = "foreground_yellow"
    FOREGROUND_BLUE = "foreground_blue"
    FOREGROUND_MAGENTA = "foreground_magenta"
    FOREGROUND_CYAN = "foreground_cyan"
    FOREGROUND_WHITE = "foreground_white"

    BACKGROUND_BLACK = "background_black"
    BACKGROUND_RED = "background_red"
    BACKGROUND_GREEN = "background_green"
    BACKGROUND_YELLOW = "background_yellow"
    BACKGROUND_BLUE = "background_blue"
    BACKGROUND_MAGENTA = "background_magenta"
    BACKGROUND_CYAN = "background_cyan"
    BACKGROUND_WHITE = "background_white"


class MessageType(str, Enum):
    """Layout category of a message."""

    HEADING = "heading"
    SUB_HEADING = "sub_heading"
    DEFAULT = "default"
    TERMINAL = "terminal"


class MessageColor(str, Enum):
    """Semantic color role of a message."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    LIGHT = "light"
    DARK = "dark"
    TERMINAL = "terminal"


ESCAPE_CODES: dict[StyleToken, str] = {
    StyleToken.RESET: "\x1b[0m",
    StyleToken.BRIGHT: "\x1b[1m",
    StyleToken.DIM: "\x1b[2m",
    StyleToken.UNDERSCORE: "\x1b[4m",
    StyleToken.BLINK: "\x1b[5m",
    StyleToken.REVERSE: "\x1b[7m",
    StyleToken.HIDDEN: "\x1b[8m",
    StyleToken.FOREGROUND_BLACK: "\x1b[30m",
    StyleToken.FOREGROUND_RED: "\x1b[31m",
    StyleToken.FOREGROUND_GREEN: "\x1b[32m",
    StyleToken.FOREGROUND_YELLOW: "\x1b[33m",
    StyleToken.FOREGROUND_BLUE: "\x1b[34m",
    StyleToken.FOREGROUND_MAGENTA: "\x1b[35m",
    StyleToken.FOREGROUND_CYAN: "\x1b[36m",
    StyleToken.FOREGROUND_WHITE: "\x1b[37m",
    StyleToken.BACKGROUND_BLACK: "\x1b[40m",
    StyleToken.BACKGROUND_RED: "\x1b[41m",
    StyleToken.BACKGROUND_GREEN: "\x1b[42m",
    StyleToken.BACKGROUND_YELLOW: "\x1b[43m",
    StyleToken.BACKGROUND_BLUE: "\x1b[44m",
    StyleToken.BACKGROUND_MAGENTA: "\x1b[45m",
    StyleToken.BACKGROUND_CYAN: "\x1b[46m",
    StyleToken.BACKGROUND_WHITE: "\x1b[47m",
}

RESET = ESCAPE_CODES[StyleToken.RESET]

TYPE_STYLES: dict[MessageType, tuple[StyleToken, ...]] = {
    MessageType.HEADING: (StyleToken.BRIGHT,),
    MessageType.SUB_HEADING: (StyleToken.BRIGHT, StyleToken.UNDERSCORE),
    MessageType.DEFAULT: (),
    MessageType.TERMINAL: (StyleToken.DIM,),
}

# No two colors share a combination
COLOR_STYLES: dict[MessageColor, tuple[StyleToken, ...]] = {
    MessageColor.PRIMARY: (StyleToken.FOREGROUND_CYAN,),
    MessageColor.SECONDARY: (StyleToken.FOREGROUND_MAGENTA,),
    MessageColor.SUCCESS: (StyleToken.FOREGROUND_GREEN,),
    MessageColor.DANGER: (StyleToken.FOREGROUND_RED,),
    MessageColor.WARNING: (StyleToken.FOREGROUND_YELLOW,),
    MessageColor.INFO: (StyleToken.FOREGROUND_BLUE,),
    MessageColor.LIGHT: (StyleToken.FOREGROUND_WHITE,),
    MessageColor.DARK: (StyleToken.FOREGROUND_BLACK,),
    MessageColor.TERMINAL: (StyleToken.BACKGROUND_BLACK, StyleToken.FOREGROUND_WHITE),
}


def _coerce(enum_cls, value):
    """Return value as a member of enum_cls, or None if it is not one."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def resolve_style(tokens: Iterable[StyleToken | str]) -> str:
    """Compose style tokens into one escape sequence.

    Starts from reset and appends each token's code in order. Plain strings
    resolve by token value ("bright", "foreground_red"); unknown tokens are
    skipped.
    """
    sequence = [RESET]
    for token in tokens:
        token = _coerce(StyleToken, token)
        if token is not None:
            sequence.append(ESCAPE_CODES[token])
    return "".join(sequence)


def style_for(message_type: MessageType | str, color: MessageColor | str) -> str:
    """Resolve the escape sequence for a (message type, color) pair."""
    tokens = [
        *TYPE_STYLES.get(_coerce(MessageType, message_type), ()),
        *COLOR_STYLES.get(_coerce(MessageColor, color), ()),
    ]
    return resolve_style(tokens)
