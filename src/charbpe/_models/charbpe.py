"""Trainable code-point level BPE tokenizer."""

import logging
import threading
from collections.abc import Sequence
from typing import Final, override

from .base import Tokenizer, UNKNOWN_TEXT, _is_token_sequence
from .._bpe import apply_merges, seed_alphabet, segment_words
from .._decorators import measure_time
from .._sanitise import render_symbol
from .._trainer import MergeObserver, train_bpe
from ..errors import TrainingInProgressError
from ..mode import EncodeMode
from ..specials import SpecialTokenRegistry
from ..types import MergeRule, SymbolPair, Token, Word
from ..vocab import Vocabulary

# hard cap on merges learned by a single training run
MAX_MERGES: Final[int] = 2000

log = logging.getLogger(__name__)


def _normalise_corpus(corpus: object) -> str:
    """Coerce training input to a string; unsupported types become empty."""
    if isinstance(corpus, str):
        return corpus
    if isinstance(corpus, (list, tuple)):
        # documents are joined on a newline so words never fuse across them
        return "\n".join(doc for doc in corpus if isinstance(doc, str))
    return ""


class CharBPETokenizer(Tokenizer):
    """
    Tokenizer that learns subword merges over Unicode code points.

    A fresh instance holds only the special tokens. ``train`` seeds one symbol
    per character of the corpus, then learns merges until the target
    vocabulary size, the merge cap, or pair exhaustion is reached.

    Encoding defaults to ``EncodeMode.CHARACTER``, which emits one id per code
    point and does not consult the learned merges. ``EncodeMode.MERGE`` applies
    merges in the order they were learned.
    """

    TOKENIZER_TYPE = "charbpe"

    def __init__(self, mode: EncodeMode | str = EncodeMode.CHARACTER) -> None:
        """Initialize an untrained tokenizer holding only the special tokens."""
        super().__init__()
        self.mode: EncodeMode = EncodeMode.get(mode)
        self.special_tokens = SpecialTokenRegistry()
        self.vocab = Vocabulary(self.special_tokens)
        # learned merge rules in priority order
        self._merges: list[MergeRule] = []
        # training segmentation, kept so repeated runs continue from it
        self._words: list[Word] = []
        self._trained = False
        # pair -> rank, built lazily for merge mode
        self._ranks: dict[SymbolPair, int] | None = None
        self._train_lock = threading.Lock()

    @measure_time
    def train(
        self,
        corpus: str | list[str],
        vocab_size: int,
        verbose: bool = False,
        on_merge: MergeObserver | None = None,
        show_progress: bool = True,
    ) -> None:
        """
        Train the tokenizer on raw text using code-point BPE.

        Never raises on bad input: a non-string corpus is treated as empty, and
        an empty corpus leaves the vocabulary unchanged. Training an already
        trained instance keeps growing the existing tables.

        :param corpus: Training text as a single string or list of strings.
        :param vocab_size: Target vocabulary size including special tokens.
        :param verbose: Log each learned merge when ``True``.
        :param on_merge: Observer called with a ``MergeEvent`` per learned merge.
        :param show_progress: Log periodic progress lines when ``True``.
        :raises TrainingInProgressError: If another ``train`` call on this
            instance has not finished yet.
        """
        if not self._train_lock.acquire(blocking=False):
            raise TrainingInProgressError(
                "training already in progress on this tokenizer", vocab_size=vocab_size
            )
        try:
            self._train(corpus, vocab_size, verbose, on_merge, show_progress)
        finally:
            self._train_lock.release()

    def _train(
        self,
        corpus: object,
        vocab_size: object,
        verbose: bool,
        on_merge: MergeObserver | None,
        show_progress: bool,
    ) -> None:
        text = _normalise_corpus(corpus)
        if not text:
            log.warning("empty training corpus, vocabulary left unchanged")
            return

        if self._trained:
            log.warning(
                "tokenizer is already trained; continuing from the existing "
                "vocabulary (use a fresh instance for an independent run)"
            )

        # state to restore if the run fails partway
        vocab_len = len(self.vocab)
        was_trained = self._trained
        try:
            self._learn(text, vocab_size, verbose, on_merge, show_progress)
        except BaseException:
            self.vocab.truncate(vocab_len)
            self._trained = was_trained
            log.warning(f"training aborted, vocabulary restored to {vocab_len} tokens")
            raise

    def _learn(
        self,
        text: str,
        vocab_size: object,
        verbose: bool,
        on_merge: MergeObserver | None,
        show_progress: bool,
    ) -> None:
        # phase 1: one symbol per distinct character, after the special range
        for char in seed_alphabet(text):
            self.vocab.add(char)
        words = self._words + segment_words(text)
        log.debug(f"alphabet seeded: vocabulary size {len(self.vocab)}")

        # phase 2: merge budget is fixed before the loop starts
        if not isinstance(vocab_size, int) or isinstance(vocab_size, bool):
            log.warning(f"invalid vocab size {vocab_size!r}, no merges learned")
            n_merges = 0
        else:
            n_merges = max(0, min(MAX_MERGES, vocab_size - len(self.vocab)))

        result = train_bpe(
            words,
            self.vocab,
            n_merges,
            verbose=verbose,
            on_merge=on_merge,
            show_progress=show_progress,
        )

        if result.n_merges_completed < n_merges:
            log.warning(
                f"no more symbol pairs to merge after {result.n_merges_completed} merges "
                f"(requested {n_merges}) stopping early"
            )

        # commit only once the whole run has succeeded
        self._words = result.words
        self._merges.extend(result.merges)
        self._trained = True
        # invalidate merge rank cache since merges changed
        self._ranks = None
        log.info(f"training complete: vocabulary size {len(self.vocab)}")

    @override
    def encode(self, text: str | None, mode: EncodeMode | str | None = None) -> list[Token]:
        """
        Encode text into token ids.

        :param text: Text to encode; ``None`` or non-string input yields ``[]``.
        :param mode: Overrides the instance encode mode for this call.
        :returns: Token ids; unseen characters map to the unknown token.
        """
        if not text or not isinstance(text, str):
            return []

        effective = self.mode if mode is None else EncodeMode.get(mode)
        symbols: Word = list(text)
        if effective is EncodeMode.MERGE and self._merges:
            symbols = apply_merges(symbols, self._get_ranks())

        unknown = self.special_tokens.unknown_id
        tokens: list[Token] = []
        for symbol in symbols:
            tok = self.vocab.id_of(symbol)
            tokens.append(unknown if tok is None else tok)
        return tokens

    @override
    def encode_batch(
        self, texts: Sequence[str], mode: EncodeMode | str | None = None
    ) -> list[list[Token]]:
        """Encode multiple texts in order with a shared encode mode."""
        return [self.encode(text, mode=mode) for text in texts]

    @override
    def decode(self, tokens: Sequence[Token]) -> str:
        """
        Decode token ids into text.

        :param tokens: Token ids; non-sequence input yields ``""``.
        :returns: Concatenated symbols; unknown ids render as the unknown token text.
        """
        if not _is_token_sequence(tokens):
            return ""
        return "".join(self.token_text(tok) for tok in tokens)

    @override
    def token_text(self, tok: Token) -> str:
        symbol = self.vocab.symbol_of(tok)
        return UNKNOWN_TEXT if symbol is None else symbol

    @override
    def vocab_size(self) -> int:
        return len(self.vocab)

    def vocab_snapshot(self) -> dict[str, Token]:
        """Return a copy of the symbol -> id table, special tokens included."""
        return self.vocab.snapshot()

    @property
    def merges(self) -> tuple[MergeRule, ...]:
        """Learned merge rules, earliest first."""
        return tuple(self._merges)

    @property
    def is_trained(self) -> bool:
        return self._trained

    def format_vocab(self) -> str:
        """
        Render the vocabulary one token per line.

        Special tokens are prefixed with ``ST``; merged tokens show the pair
        they were built from.
        """
        derivations: dict[str, MergeRule] = {}
        for left, right in self._merges:
            derivations.setdefault(left + right, (left, right))

        lines: list[str] = []
        for tok, symbol in enumerate(self.vocab.symbols()):
            if symbol in self.special_tokens:
                lines.append(f"ST [{tok}] {symbol}")
            elif symbol in derivations:
                left, right = derivations[symbol]
                lines.append(
                    f"[{tok}] [{render_symbol(left)}][{render_symbol(right)}] -> {render_symbol(symbol)}"
                )
            else:
                lines.append(f"[{tok}] {render_symbol(symbol)}")
        return "\n".join(lines)

    def _get_ranks(self) -> dict[SymbolPair, int]:
        """Build or return the cached pair -> rank table."""
        if self._ranks is None:
            ranks: dict[SymbolPair, int] = {}
            for rank, pair in enumerate(self._merges):
                # a pair relearned on a later run keeps its first rank
                ranks.setdefault(pair, rank)
            self._ranks = ranks
        return self._ranks
