"""
Core Byte Pair Encoding (BPE) operations over code-point symbols.
"""

from collections import Counter
from typing import Final

import regex as re

from .types import Symbol, SymbolPair, Word

# punctuation and whitespace always present in a trained alphabet
ALPHABET_SEED: Final[str] = " \n\t!@#$%^&*()[]{}"

_WHITESPACE_RUN: Final = re.compile(r"\s+")


def seed_alphabet(corpus: str) -> list[Symbol]:
    """Return the distinct characters of ``corpus`` plus the seed set, in first-occurrence order."""
    # dict preserves insertion order, giving a reproducible id order
    return list(dict.fromkeys(corpus + ALPHABET_SEED))


def segment_words(corpus: str) -> list[Word]:
    """
    Split a corpus into words of single-character symbols.

    Every whitespace run collapses to one space before splitting, so no word
    ever contains whitespace and merges never cross word boundaries.
    """
    normalised = _WHITESPACE_RUN.sub(" ", corpus)
    return [list(piece) for piece in normalised.split(" ") if piece]


def pair_freqs(words: list[Word]) -> Counter[SymbolPair]:
    """Count adjacent symbol pairs within each word."""
    counts: Counter[SymbolPair] = Counter()
    for word in words:
        counts.update(zip(word, word[1:]))
    return counts


def select_pair(counts: Counter[SymbolPair]) -> SymbolPair | None:
    """
    Pick the next pair to merge.

    Highest count wins; ties go to the lexicographically smallest
    ``(left, right)`` pair so the result never depends on counter order.
    """
    best: SymbolPair | None = None
    best_count = 0
    for pair, count in counts.items():
        if count > best_count or (count == best_count and best is not None and pair < best):
            best, best_count = pair, count
    return best


def merge_word(word: Word, target: SymbolPair) -> Word:
    """Collapse every non-overlapping occurrence of ``target``, scanning left to right."""
    merged: Word = []
    left, right = target

    i = 0
    n = len(word)
    while i < n:
        # check if we can form a pair and it matches the target
        if i < n - 1 and word[i] == left and word[i + 1] == right:
            merged.append(left + right)
            i += 2
        else:
            merged.append(word[i])
            i += 1

    return merged


def merge_words(words: list[Word], target: SymbolPair) -> list[Word]:
    """Apply :func:`merge_word` to every word."""
    return [merge_word(word, target) for word in words]


def apply_merges(symbols: Word, ranks: dict[SymbolPair, int]) -> Word:
    """
    Greedily apply learned merges to a symbol sequence.

    Each round merges the adjacent pair with the lowest rank (earliest learned)
    everywhere it occurs, until no adjacent pair has a rank.
    """
    while len(symbols) >= 2:
        candidates = {pair for pair in zip(symbols, symbols[1:]) if pair in ranks}
        if not candidates:
            break
        best = min(candidates, key=lambda pair: ranks[pair])
        symbols = merge_word(symbols, best)
    return symbols


__all__ = [
    "ALPHABET_SEED",
    "seed_alphabet",
    "segment_words",
    "pair_freqs",
    "select_pair",
    "merge_word",
    "merge_words",
    "apply_merges",
]
