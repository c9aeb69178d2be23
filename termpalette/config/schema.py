from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from termpalette.constants import NICK_COLOR_COUNT
from termpalette.palette import parse_color_spec
from termpalette.types import SemanticColor

_DEFAULT_NICK_COLORS = [
    "cyan",
    "magenta",
    "green",
    "brown",
    "lightblue",
    "default",
    "lightcyan",
    "lightmagenta",
    "lightgreen",
    "blue",
    "red",
    "lightred",
    "yellow",
    "darkgray",
    "white",
    "black",
]


def _check_color(value: object) -> str:
    if not isinstance(value, str) or parse_color_spec(value) is None:
        raise ValueError(f"Unknown color: {value!r}. Expected a color name or a pair number")
    return value


def _encode(value: str) -> int:
    encoded = parse_color_spec(value)
    if encoded is None:  # rejected at validation time
        raise ValueError(f"Unknown color: {value!r}")
    return encoded


class LookConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    # False: white on default bg uses the terminal foreground (light backgrounds)
    color_real_white: bool = False
    highlight_white_bg: Optional[int] = Field(default=None, ge=-1)

    @property
    def disable_true_white(self) -> bool:
        return not self.color_real_white


class ColorsConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    separator: str = "blue"
    chat: str = "default"
    chat_bg: str = "default"
    chat_time: str = "default"
    chat_time_delimiters: str = "brown"
    chat_prefix_error: str = "yellow"
    chat_prefix_network: str = "magenta"
    chat_prefix_action: str = "white"
    chat_prefix_join: str = "lightgreen"
    chat_prefix_quit: str = "lightred"
    chat_prefix_more: str = "lightmagenta"
    chat_prefix_suffix: str = "green"
    chat_buffer: str = "white"
    chat_server: str = "brown"
    chat_channel: str = "white"
    chat_nick: str = "lightcyan"
    chat_nick_self: str = "white"
    chat_nick_other: str = "default"
    chat_nick_colors: List[str] = Field(
        default_factory=lambda: list(_DEFAULT_NICK_COLORS),
        min_length=NICK_COLOR_COUNT,
        max_length=NICK_COLOR_COUNT,
    )
    chat_host: str = "cyan"
    chat_delimiters: str = "lightgreen"
    chat_highlight: str = "yellow"
    chat_highlight_bg: str = "magenta"
    chat_read_marker: str = "magenta"
    chat_read_marker_bg: str = "default"
    chat_text_found: str = "yellow"
    chat_text_found_bg: str = "lightmagenta"
    chat_value: str = "cyan"
    chat_prefix_buffer: str = "brown"

    @field_validator(
        "separator",
        "chat",
        "chat_bg",
        "chat_time",
        "chat_time_delimiters",
        "chat_prefix_error",
        "chat_prefix_network",
        "chat_prefix_action",
        "chat_prefix_join",
        "chat_prefix_quit",
        "chat_prefix_more",
        "chat_prefix_suffix",
        "chat_buffer",
        "chat_server",
        "chat_channel",
        "chat_nick",
        "chat_nick_self",
        "chat_nick_other",
        "chat_host",
        "chat_delimiters",
        "chat_highlight",
        "chat_highlight_bg",
        "chat_read_marker",
        "chat_read_marker_bg",
        "chat_text_found",
        "chat_text_found_bg",
        "chat_value",
        "chat_prefix_buffer",
        mode="before",
    )
    @classmethod
    def validate_color(cls, v: object) -> str:
        """Accept bare pair numbers from YAML and reject names missing from the palette."""
        return _check_color(str(v) if isinstance(v, int) else v)

    @field_validator("chat_nick_colors", mode="before")
    @classmethod
    def validate_nick_colors(cls, v: object) -> object:
        if not isinstance(v, list):
            return v
        return [_check_color(str(value) if isinstance(value, int) else value) for value in v]

    def color_specs(self) -> Dict[SemanticColor, Tuple[int, int]]:
        """Return encoded (foreground, background) values per semantic color."""
        bg = _encode(self.chat_bg)
        specs: Dict[SemanticColor, Tuple[int, int]] = {
            SemanticColor.SEPARATOR: (_encode(self.separator), bg),
            SemanticColor.CHAT: (_encode(self.chat), bg),
            SemanticColor.CHAT_TIME: (_encode(self.chat_time), bg),
            SemanticColor.CHAT_TIME_DELIMITERS: (_encode(self.chat_time_delimiters), bg),
            SemanticColor.CHAT_PREFIX_ERROR: (_encode(self.chat_prefix_error), bg),
            SemanticColor.CHAT_PREFIX_NETWORK: (_encode(self.chat_prefix_network), bg),
            SemanticColor.CHAT_PREFIX_ACTION: (_encode(self.chat_prefix_action), bg),
            SemanticColor.CHAT_PREFIX_JOIN: (_encode(self.chat_prefix_join), bg),
            SemanticColor.CHAT_PREFIX_QUIT: (_encode(self.chat_prefix_quit), bg),
            SemanticColor.CHAT_PREFIX_MORE: (_encode(self.chat_prefix_more), bg),
            SemanticColor.CHAT_PREFIX_SUFFIX: (_encode(self.chat_prefix_suffix), bg),
            SemanticColor.CHAT_BUFFER: (_encode(self.chat_buffer), bg),
            SemanticColor.CHAT_SERVER: (_encode(self.chat_server), bg),
            SemanticColor.CHAT_CHANNEL: (_encode(self.chat_channel), bg),
            SemanticColor.CHAT_NICK: (_encode(self.chat_nick), bg),
            SemanticColor.CHAT_NICK_SELF: (_encode(self.chat_nick_self), bg),
            SemanticColor.CHAT_NICK_OTHER: (_encode(self.chat_nick_other), bg),
            SemanticColor.CHAT_HOST: (_encode(self.chat_host), bg),
            SemanticColor.CHAT_DELIMITERS: (_encode(self.chat_delimiters), bg),
            SemanticColor.CHAT_HIGHLIGHT: (_encode(self.chat_highlight), _encode(self.chat_highlight_bg)),
            SemanticColor.CHAT_READ_MARKER: (_encode(self.chat_read_marker), _encode(self.chat_read_marker_bg)),
            SemanticColor.CHAT_TEXT_FOUND: (_encode(self.chat_text_found), _encode(self.chat_text_found_bg)),
            SemanticColor.CHAT_VALUE: (_encode(self.chat_value), bg),
            SemanticColor.CHAT_PREFIX_BUFFER: (_encode(self.chat_prefix_buffer), bg),
        }
        for offset, value in enumerate(self.chat_nick_colors):
            specs[SemanticColor(SemanticColor.CHAT_NICK1 + offset)] = (_encode(value), bg)
        return specs


class TermPaletteConfig(BaseModel):
    model_config = ConfigDict(extra="allow")
    look: LookConfig = Field(default_factory=LookConfig)
    colors: ColorsConfig = Field(default_factory=ColorsConfig)
