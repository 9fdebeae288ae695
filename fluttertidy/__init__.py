"""Find unused assets, source files and dependencies in Flutter projects."""

__version__ = "0.3.0"

__all__ = ["__version__"]
