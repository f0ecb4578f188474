"""Renderers that make a logo grid visible."""

from mu_logo.render.terminal import TerminalRenderer
from mu_logo.render.svg import SvgSurface, palette_svg
from mu_logo.render.image import save_png, to_image

__all__ = ["TerminalRenderer", "SvgSurface", "palette_svg", "to_image", "save_png"]
