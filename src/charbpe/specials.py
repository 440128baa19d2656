"""Reserved special tokens with fixed low-numbered ids."""

from enum import Enum
from typing import Iterator

from .types import Token


class SpecialToken(str, Enum):
    """
    Reserved symbols, in id order.

    Ids are assigned from declaration order starting at 0, so reordering these
    members changes every id in the vocabulary.
    """

    ENDOFTEXT = "<|endoftext|>"
    STARTOFTEXT = "<|startoftext|>"
    UNKNOWN = "<|unknown|>"
    SPACE = "<|space|>"


class SpecialTokenRegistry:
    """Fixed bidirectional mapping between special token text and ids."""

    def __init__(self) -> None:
        self._by_text: dict[str, Token] = {}
        self._by_id: dict[Token, str] = {}
        for tok, special in enumerate(SpecialToken):
            self._by_text[special.value] = tok
            self._by_id[tok] = special.value

    def id_of(self, text: str) -> Token | None:
        """Return the id of a special token, or ``None`` if not reserved."""
        return self._by_text.get(text)

    def text_of(self, tok: Token) -> str | None:
        """Return the text of a special token id, or ``None`` if not reserved."""
        return self._by_id.get(tok)

    @property
    def unknown_id(self) -> Token:
        return self._by_text[SpecialToken.UNKNOWN.value]

    @property
    def unknown_text(self) -> str:
        return SpecialToken.UNKNOWN.value

    def items(self) -> Iterator[tuple[str, Token]]:
        """Yield ``(text, id)`` pairs in id order."""
        return iter(self._by_text.items())

    def __contains__(self, text: object) -> bool:
        return text in self._by_text

    def __len__(self) -> int:
        return len(self._by_text)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._by_text)!r})"


__all__ = ["SpecialToken", "SpecialTokenRegistry"]
