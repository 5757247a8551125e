from .format_processor import FORMAT_KEYWORD, FormatProcessor
from .format_validator import FormatValidator

__all__ = ["FORMAT_KEYWORD", "FormatProcessor", "FormatValidator"]
