from .dictionary import Dictionary, DictionaryBuilder

__all__ = ["Dictionary", "DictionaryBuilder"]
