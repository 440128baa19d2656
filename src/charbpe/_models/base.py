"""
Base tokenizer interface shared by the trainable engine and external encoders.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Final, Self

from ..types import Token

UNKNOWN_TEXT: Final[str] = "<|unknown|>"

log = logging.getLogger(__name__)


class Tokenizer(ABC):
    """
    Abstract base class for tokenizers.

    Encoding and decoding never raise on malformed input: empty or non-string
    text encodes to ``[]`` and anything that is not a sequence of ids decodes
    to ``""``.
    """

    TOKENIZER_TYPE: str = "base"

    @abstractmethod
    def encode(self, text: str | None) -> list[Token]:
        """Encode text into a sequence of tokens."""
        ...

    @abstractmethod
    def decode(self, tokens: Sequence[Token]) -> str:
        """Decode a sequence of tokens back into text."""
        ...

    @abstractmethod
    def token_text(self, tok: Token) -> str:
        """Return the text of one token, or the unknown token text."""
        ...

    @abstractmethod
    def vocab_size(self) -> int:
        """Return the number of tokens in the vocabulary."""
        ...

    def model_name(self) -> str:
        """Return the identifier of the encoding actually in use."""
        return self.TOKENIZER_TYPE

    def close(self) -> None:
        """Release any resources held by the tokenizer."""

    def encode_batch(self, texts: Sequence[str]) -> list[list[Token]]:
        """Encode multiple texts in order."""
        return [self.encode(text) for text in texts]

    def decode_batch(self, token_batch: Sequence[Sequence[Token]]) -> list[str]:
        """Decode multiple token sequences in order."""
        return [self.decode(tokens) for tokens in token_batch]

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _is_token_sequence(tokens: object) -> bool:
    """Check for a list-like container of ids; strings and bytes do not count."""
    return isinstance(tokens, Sequence) and not isinstance(
        tokens, (str, bytes, bytearray)
    )
