"""Terminal message helpers, an editor project-file generator and worked exercise solutions."""

__version__ = "5.0.0"