"""
Adapter around tiktoken's pre-built encodings, used to cross-check the
trainable tokenizer against production vocabularies.
"""

import logging
from collections.abc import Sequence
from typing import Final, override

import tiktoken

from .base import Tokenizer, UNKNOWN_TEXT, _is_token_sequence
from ..errors import EncoderReleasedError
from ..types import Token

DEFAULT_MODEL: Final[str] = "gpt-3.5-turbo"
FALLBACK_ENCODING: Final[str] = "cl100k_base"

log = logging.getLogger(__name__)


class TiktokenEncoder(Tokenizer):
    """
    Tokenizer backed by a tiktoken encoding.

    Construction never fails for an unrecognised model name: the encoder falls
    back to ``cl100k_base`` and reports it through ``model_name()`` and
    ``fell_back`` so callers can show which encoding actually ran.

    The encoding must be released with ``close()`` (or by using the encoder as
    a context manager) once the caller is done with it.
    """

    TOKENIZER_TYPE = "tiktoken"

    def __init__(self, model_name: str = DEFAULT_MODEL) -> None:
        super().__init__()
        self.requested_model = model_name
        try:
            self._encoding: tiktoken.Encoding | None = tiktoken.encoding_for_model(
                model_name
            )
            self._model_name = model_name
            self.fell_back = False
        except KeyError:
            log.warning(
                f"model {model_name!r} not found, falling back to {FALLBACK_ENCODING}"
            )
            self._encoding = tiktoken.get_encoding(FALLBACK_ENCODING)
            self._model_name = FALLBACK_ENCODING
            self.fell_back = True

    @override
    def encode(self, text: str | None) -> list[Token]:
        """Encode text; special token markup in ``text`` is encoded as plain text."""
        if not text or not isinstance(text, str):
            return []
        return list(self._require_encoding().encode(text, disallowed_special=()))

    @override
    def decode(self, tokens: Sequence[Token]) -> str:
        """Decode tokens; ids outside the encoding render as the unknown token text."""
        if not _is_token_sequence(tokens):
            return ""
        encoding = self._require_encoding()
        try:
            return encoding.decode(list(tokens))
        except (KeyError, ValueError, TypeError, OverflowError):
            log.debug("bulk decode failed, decoding token by token")
            return "".join(self.token_text(tok) for tok in tokens)

    @override
    def token_text(self, tok: Token) -> str:
        encoding = self._require_encoding()
        try:
            return encoding.decode([tok])
        except (KeyError, ValueError, TypeError, OverflowError):
            return UNKNOWN_TEXT

    @override
    def vocab_size(self) -> int:
        return self._require_encoding().n_vocab

    @override
    def model_name(self) -> str:
        return self._model_name

    @property
    def closed(self) -> bool:
        return self._encoding is None

    @override
    def close(self) -> None:
        """Drop the encoding; safe to call more than once."""
        if self._encoding is not None:
            log.debug(f"releasing encoding for {self._model_name}")
            self._encoding = None

    def _require_encoding(self) -> tiktoken.Encoding:
        if self._encoding is None:
            raise EncoderReleasedError(
                "encoder used after release", model_name=self._model_name
            )
        return self._encoding
