"""Tokenizer implementations for code-point BPE and external encodings."""

from .base import Tokenizer
from .charbpe import CharBPETokenizer
from .external import TiktokenEncoder


__all__ = ["Tokenizer", "CharBPETokenizer", "TiktokenEncoder"]
