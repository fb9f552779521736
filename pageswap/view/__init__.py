from pageswap.view.delegate import ViewDelegate
from pageswap.view.interception import (
    RenderInterception,
    RenderInterceptionTimeout,
    ResumeSignal,
)
from pageswap.view.view import View

__all__ = [
    "RenderInterception",
    "RenderInterceptionTimeout",
    "ResumeSignal",
    "View",
    "ViewDelegate",
]
