"""Oxford dictionary lookups rendered as Org-mode outlines."""

__version__ = "0.1.0"
