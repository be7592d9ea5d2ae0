"""GPX input."""
from .parser import GPXParserService

__all__ = ["GPXParserService"]
