"""Layout geometry, navigation, socket messages and script generation for a tiling window manager."""

__version__ = "0.1.0"