"""Core module containing interfaces."""

from webinars.core.interfaces import IWebinarRepository

__all__ = ["IWebinarRepository"]
