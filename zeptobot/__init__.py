"""ZeptoBot: a tool-calling chat agent that can drive the desktop."""

__version__ = "0.1.0"
