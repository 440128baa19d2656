"""Token statistics for comparing tokenizers on the same text."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final, TYPE_CHECKING

from .types import Token

if TYPE_CHECKING:
    from ._models.base import Tokenizer

# rough price in dollars per 1000 tokens
COST_PER_1K_TOKENS: Final[float] = 0.03


@dataclass(frozen=True)
class TokenStats:
    """Summary of one encoding of a text."""

    characters: int
    tokens: int
    unique: int
    # tokens per character; lower means better compression
    compression: float
    cost: float


def token_stats(text: str, tokens: Sequence[Token]) -> TokenStats:
    """Compute token statistics for ``tokens`` produced from ``text``."""
    n_chars = len(text)
    n_tokens = len(tokens)
    return TokenStats(
        characters=n_chars,
        tokens=n_tokens,
        unique=len(set(tokens)),
        compression=n_tokens / n_chars if n_chars else 0.0,
        cost=n_tokens * COST_PER_1K_TOKENS / 1000,
    )


def compare_encoders(
    text: str, encoders: Iterable["Tokenizer"]
) -> dict[str, TokenStats]:
    """Encode ``text`` with each encoder and key the stats by its model name."""
    return {enc.model_name(): token_stats(text, enc.encode(text)) for enc in encoders}


__all__ = ["COST_PER_1K_TOKENS", "TokenStats", "token_stats", "compare_encoders"]
