from .validator import KeywordValidator

__all__ = ["KeywordValidator"]
