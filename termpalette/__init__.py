"""termpalette - semantic terminal colors on top of curses color pairs."""

__version__ = "0.3.0"
