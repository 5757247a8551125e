"""Format attributes and their default dictionaries."""

from .attribute import AbstractFormatAttribute, FormatAttribute
from .library import DRAFTV3, DRAFTV4, DRAFTV3_FORMATS, DRAFTV4_FORMATS, available_drafts, get_format_dictionary

__all__ = [
    "FormatAttribute",
    "AbstractFormatAttribute",
    "DRAFTV3",
    "DRAFTV4",
    "DRAFTV3_FORMATS",
    "DRAFTV4_FORMATS",
    "available_drafts",
    "get_format_dictionary",
]
