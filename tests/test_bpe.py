"""Unit tests for the core BPE operations, vocabulary and special tokens."""

from collections import Counter

import pytest

from charbpe._bpe import (
    ALPHABET_SEED,
    apply_merges,
    merge_word,
    merge_words,
    pair_freqs,
    seed_alphabet,
    segment_words,
    select_pair,
)
from charbpe._progress import _is_enabled, disable_progress, enable_progress
from charbpe._sanitise import render_symbol
from charbpe.mode import EncodeMode, list_encode_modes
from charbpe.specials import SpecialToken, SpecialTokenRegistry
from charbpe.vocab import Vocabulary


# Alphabet and segmentation
# ---------------------------------------------------------------------------


def test_seed_alphabet_order_and_dedup():
    """Corpus characters keep first-occurrence order and the seed is appended once."""
    alphabet = seed_alphabet("baab!")
    assert alphabet[:3] == ["b", "a", "!"]
    assert len(alphabet) == len(set(alphabet))
    assert set(ALPHABET_SEED) <= set(alphabet)
    assert len(alphabet) == 2 + len(ALPHABET_SEED)


def test_segment_words_normalises_whitespace():
    """Whitespace runs of any kind separate words and are dropped."""
    assert segment_words("  hi\n\tthere  ") == [["h", "i"], ["t", "h", "e", "r", "e"]]
    assert segment_words("a b") == [["a"], ["b"]]
    assert segment_words("   ") == []


# Pair counting and selection
# ---------------------------------------------------------------------------


def test_pair_freqs_stay_inside_words():
    """Pairs are counted within words, never across them."""
    counts = pair_freqs([["a", "b", "a", "b"], ["a", "b"], ["c"], ["d"]])
    assert counts == Counter({("a", "b"): 3, ("b", "a"): 1})


def test_select_pair_breaks_ties_lexicographically():
    """The highest count wins, then the smallest pair."""
    counts = Counter({("b", "a"): 2, ("z", "z"): 1, ("a", "c"): 2})
    assert select_pair(counts) == ("a", "c")


def test_select_pair_on_empty_counts():
    assert select_pair(Counter()) is None


# Merging
# ---------------------------------------------------------------------------


def test_merge_word_is_leftmost_non_overlapping():
    """Overlapping candidates are resolved from the left."""
    assert merge_word(["a", "a", "a"], ("a", "a")) == ["aa", "a"]
    assert merge_word(["a", "b", "c", "a", "b"], ("a", "b")) == ["ab", "c", "ab"]


def test_merge_words_leaves_input_untouched():
    words = [["a", "b"], ["b", "a"]]
    assert merge_words(words, ("a", "b")) == [["ab"], ["b", "a"]]
    assert words == [["a", "b"], ["b", "a"]]


def test_apply_merges_respects_rank():
    """Earlier merges take priority over later ones."""
    assert apply_merges(list("abc"), {("b", "c"): 0, ("a", "b"): 1}) == ["a", "bc"]
    assert apply_merges(list("abab"), {("a", "b"): 0, ("ab", "ab"): 1}) == ["abab"]
    assert apply_merges(list("xyz"), {}) == ["x", "y", "z"]


# Vocabulary and special tokens
# ---------------------------------------------------------------------------


def test_special_registry_lookup():
    registry = SpecialTokenRegistry()
    assert len(registry) == 4
    assert registry.id_of("<|endoftext|>") == 0
    assert registry.text_of(3) == SpecialToken.SPACE.value
    assert registry.id_of("<|missing|>") is None
    assert "<|unknown|>" in registry


def test_vocabulary_never_reassigns_ids():
    """Adding a known symbol returns its id without allocating."""
    vocab = Vocabulary(SpecialTokenRegistry())
    first = vocab.add("ab")
    assert first == 4
    assert vocab.add("ab") == first
    assert vocab.add("<|unknown|>") == 2
    assert len(vocab) == 5


def test_vocabulary_truncate_frees_ids():
    """Truncated symbols disappear from both tables and their ids are handed out again."""
    vocab = Vocabulary(SpecialTokenRegistry())
    vocab.add("x")
    vocab.add("y")
    vocab.truncate(5)
    assert len(vocab) == 5
    assert "y" not in vocab
    assert vocab.symbol_of(5) is None
    assert vocab.add("z") == 5
    assert vocab.id_of("<|space|>") == 3


def test_vocabulary_inverse_lookup():
    vocab = Vocabulary(SpecialTokenRegistry())
    vocab.add("x")
    assert vocab.symbol_of(4) == "x"
    assert vocab.symbol_of(5) is None
    assert vocab.symbol_of(-1) is None
    assert vocab.symbol_of("4") is None
    assert vocab.symbol_of(True) is None


# Modes, rendering, progress
# ---------------------------------------------------------------------------


def test_encode_mode_lookup():
    assert EncodeMode.get("MERGE") is EncodeMode.MERGE
    assert EncodeMode.get(EncodeMode.CHARACTER) is EncodeMode.CHARACTER
    assert list_encode_modes() == ["character", "merge"]


def test_render_symbol():
    assert render_symbol(" ") == "␣"
    assert render_symbol("\t") == "\\u0009"
    assert render_symbol("ab") == "ab"


def test_progress_toggle(monkeypatch):
    monkeypatch.delenv("CHARBPE_DISABLE_PROGRESS", raising=False)
    disable_progress()
    assert not _is_enabled()
    enable_progress()
    assert _is_enabled()
    monkeypatch.setenv("CHARBPE_DISABLE_PROGRESS", "1")
    assert not _is_enabled()


@pytest.mark.parametrize("corpus", ["", "a", "a b c"])
def test_no_pairs_in_degenerate_corpora(corpus):
    """Single-character words never produce pairs."""
    assert select_pair(pair_freqs(segment_words(corpus))) is None
