"""Standalone BPE training module."""

from dataclasses import dataclass
import logging
from typing import Callable

from ._bpe import merge_words, pair_freqs, select_pair
from ._progress import _is_enabled
from ._sanitise import render_symbol
from .types import MergeRule, Symbol, SymbolPair, Token, Word
from .vocab import Vocabulary

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeEvent:
    """One learned merge, as reported to training observers."""

    index: int
    pair: SymbolPair
    symbol: Symbol
    token: Token
    count: int


type MergeObserver = Callable[[MergeEvent], None]


@dataclass
class BPETrainingResult:
    """Results from one BPE training run."""

    words: list[Word]
    merges: list[MergeRule]
    n_merges_completed: int


def train_bpe(
    words: list[Word],
    vocab: Vocabulary,
    n_merges: int,
    *,
    verbose: bool = False,
    on_merge: MergeObserver | None = None,
    show_progress: bool = True,
) -> BPETrainingResult:
    """
    Learn up to ``n_merges`` merge rules from segmented words.

    ``vocab`` is extended in place with one entry per merge; ``words`` is not
    mutated, the collapsed segmentation is returned in the result instead.

    :param words: Words as lists of symbols; pairs never cross word boundaries.
    :param vocab: Vocabulary receiving merged symbols.
    :param n_merges: Maximum number of merge operations to perform.
    :param verbose: Log each learned merge when ``True``.
    :param on_merge: Observer called once per learned merge.
    :param show_progress: Log a progress line every tenth of the budget when ``True``.
    :returns: Collapsed words, learned merge rules and completed merge count.
    """
    merges: list[MergeRule] = []
    report_every = max(1, n_merges // 10)
    progress = show_progress and _is_enabled()

    for i in range(n_merges):
        counts = pair_freqs(words)
        pair = select_pair(counts)
        # no adjacent pairs left anywhere: terminal state
        if pair is None:
            break

        words = merge_words(words, pair)
        merges.append(pair)
        symbol = pair[0] + pair[1]
        tok = vocab.add(symbol)

        if verbose:
            log.info(
                "merge %d/%d: (%s, %s) -> %s [%d] (count %d)",
                i + 1,
                n_merges,
                render_symbol(pair[0]),
                render_symbol(pair[1]),
                render_symbol(symbol),
                tok,
                counts[pair],
            )
        elif progress and (i + 1) % report_every == 0:
            log.info("training progress: %d/%d merges", i + 1, n_merges)

        if on_merge is not None:
            on_merge(
                MergeEvent(
                    index=i,
                    pair=pair,
                    symbol=symbol,
                    token=tok,
                    count=counts[pair],
                )
            )

    return BPETrainingResult(
        words=words,
        merges=merges,
        n_merges_completed=len(merges),
    )


__all__ = ["BPETrainingResult", "MergeEvent", "MergeObserver", "train_bpe"]
