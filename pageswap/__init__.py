from pageswap.capture.dom import DOMCapture
from pageswap.core.config import DEFAULT_CONFIG, PageSwapConfig
from pageswap.core.types import (
    Document,
    Element,
    ScrollPosition,
    VisitDirection,
    Window,
)
from pageswap.render import PermanentElementPreserver, Renderer, ReplaceRenderer
from pageswap.snapshot import Snapshot
from pageswap.view import (
    RenderInterception,
    RenderInterceptionTimeout,
    ResumeSignal,
    View,
    ViewDelegate,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DOMCapture",
    "Document",
    "Element",
    "PageSwapConfig",
    "ScrollPosition",
    "Snapshot",
    "VisitDirection",
    "Window",
    # Rendering
    "PermanentElementPreserver",
    "RenderInterception",
    "RenderInterceptionTimeout",
    "Renderer",
    "ReplaceRenderer",
    "ResumeSignal",
    "View",
    "ViewDelegate",
]
