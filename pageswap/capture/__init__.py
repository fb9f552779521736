from pageswap.capture.dom import DOMCapture

__all__ = ["DOMCapture"]
