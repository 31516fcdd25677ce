"""chatmark - render streaming chat-assistant markdown."""

__version__ = "0.1.0"
