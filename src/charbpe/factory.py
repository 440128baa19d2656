"""Factory functions for creating tokenizers and external encoders."""

from typing import Final

from ._models.charbpe import CharBPETokenizer
from ._models.external import DEFAULT_MODEL, TiktokenEncoder
from .mode import EncodeMode

# model identifier -> display name, newest first
TIKTOKEN_MODELS: Final[dict[str, str]] = {
    "gpt-4o": "GPT-4o (Latest)",
    "gpt-4o-mini": "GPT-4o Mini",
    "gpt-4-turbo": "GPT-4 Turbo",
    "gpt-4": "GPT-4",
    "gpt-3.5-turbo": "GPT-3.5 Turbo",
    "text-davinci-003": "Text Davinci 003",
    "text-davinci-002": "Text Davinci 002",
}


def list_models() -> list[str]:
    """Return identifiers of the known external models."""
    return list(TIKTOKEN_MODELS.keys())


def get_tokenizer(mode: EncodeMode | str = EncodeMode.CHARACTER) -> CharBPETokenizer:
    """
    Create an untrained code-point BPE tokenizer.

    :param mode: Default encode mode, "character" or "merge".
    :raises ModeError: If ``mode`` is not a known encode mode.

    .. code-block:: python

        tokenizer = get_tokenizer("merge")
        tokenizer.train("ab ab ab ac", vocab_size=64)
    """
    return CharBPETokenizer(mode)


def get_encoder(model_name: str = DEFAULT_MODEL) -> TiktokenEncoder:
    """
    Create an external encoder for ``model_name``.

    Unknown names fall back to ``cl100k_base``; check ``model_name()`` on the
    result for the encoding actually in use. Release it with ``close()``.

    .. code-block:: python

        with get_encoder("gpt-4o") as enc:
            tokens = enc.encode("Hello world")
    """
    return TiktokenEncoder(model_name)


__all__ = ["TIKTOKEN_MODELS", "list_models", "get_tokenizer", "get_encoder"]
