"""
Symbol table shared by encoding and decoding.

Ids index directly into a list of symbols and a hash index maps symbols back
to ids, so the forward and inverse tables can never disagree.
"""

import logging

from .specials import SpecialTokenRegistry
from .types import Symbol, Token

log = logging.getLogger(__name__)


class Vocabulary:
    """Bijection between symbol strings and integer ids; ids only grow between rollbacks."""

    def __init__(self, specials: SpecialTokenRegistry) -> None:
        # id -> symbol
        self._symbols: list[Symbol] = []
        # symbol -> id
        self._index: dict[Symbol, Token] = {}
        # special tokens always occupy ids 0..k-1
        for text, _ in specials.items():
            self.add(text)
        log.debug(f"vocabulary initialised with {len(self)} special tokens")

    def add(self, symbol: Symbol) -> Token:
        """
        Register ``symbol`` and return its id.

        A symbol that is already present keeps its existing id; nothing new is
        allocated.
        """
        existing = self._index.get(symbol)
        if existing is not None:
            return existing
        tok = len(self._symbols)
        self._symbols.append(symbol)
        self._index[symbol] = tok
        return tok

    def truncate(self, size: int) -> None:
        """Drop every entry with an id at or above ``size``; used to undo a failed run."""
        for symbol in self._symbols[size:]:
            del self._index[symbol]
        del self._symbols[size:]

    def id_of(self, symbol: Symbol) -> Token | None:
        return self._index.get(symbol)

    def symbol_of(self, tok: object) -> Symbol | None:
        """Return the symbol for ``tok`` or ``None`` if it was never assigned."""
        # bool is an int subclass but never a valid id
        if not isinstance(tok, int) or isinstance(tok, bool):
            return None
        if 0 <= tok < len(self._symbols):
            return self._symbols[tok]
        return None

    def symbols(self) -> list[Symbol]:
        """Return all symbols ordered by id."""
        return list(self._symbols)

    def snapshot(self) -> dict[Symbol, Token]:
        """Return a copy of the symbol -> id table."""
        return dict(self._index)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __len__(self) -> int:
        return len(self._symbols)


__all__ = ["Vocabulary"]
