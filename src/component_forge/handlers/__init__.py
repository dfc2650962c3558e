"""Request handlers."""

from .panel import PanelHandler, error_response

__all__ = ["PanelHandler", "error_response"]
