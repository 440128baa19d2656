"""
Core types for tokenization.
"""

type Token = int
type Symbol = str
type SymbolPair = tuple[Symbol, Symbol]
type MergeRule = tuple[Symbol, Symbol]
type Word = list[Symbol]
