"""Color configuration.

Colors are configured per semantic slot in YAML:

    look:
      color_real_white: false
    colors:
      chat: default
      chat_nick_self: lightcyan
      chat_highlight: "12"    # explicit terminal pair

and loaded with:
    from termpalette.config import load_config
"""

from termpalette.config.loader import load_config, resolve_config_path
from termpalette.config.schema import ColorsConfig, LookConfig, TermPaletteConfig

__all__ = ["ColorsConfig", "LookConfig", "TermPaletteConfig", "load_config", "resolve_config_path"]
