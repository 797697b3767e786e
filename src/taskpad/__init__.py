"""Single-list task editor with a durable snapshot mirror."""

__version__ = "0.1.0"
