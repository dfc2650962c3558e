"""Component Forge - React component generation from natural-language descriptions."""

__version__ = "0.1.0"
