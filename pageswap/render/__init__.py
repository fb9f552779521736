from pageswap.render.permanent import PermanentElementPreserver
from pageswap.render.renderer import Renderer
from pageswap.render.replace import ReplaceRenderer

__all__ = ["PermanentElementPreserver", "Renderer", "ReplaceRenderer"]
