"""charbpe: code-point level Byte-Pair-Encoding tokenization library."""

from ._models.base import Tokenizer
from ._models.charbpe import CharBPETokenizer
from ._models.external import TiktokenEncoder
from ._progress import disable_progress, enable_progress
from ._trainer import MergeEvent
from .factory import TIKTOKEN_MODELS, get_encoder, get_tokenizer, list_models
from .mode import EncodeMode, list_encode_modes
from .samples import SAMPLE_TEXTS, sample_corpus
from .specials import SpecialToken, SpecialTokenRegistry
from .stats import TokenStats, compare_encoders, token_stats
from .vocab import Vocabulary

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("charbpe")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Tokenizer",
    "CharBPETokenizer",
    "TiktokenEncoder",
    "EncodeMode",
    "MergeEvent",
    "SpecialToken",
    "SpecialTokenRegistry",
    "Vocabulary",
    "TokenStats",
    "TIKTOKEN_MODELS",
    "SAMPLE_TEXTS",
    "get_tokenizer",
    "get_encoder",
    "list_models",
    "list_encode_modes",
    "sample_corpus",
    "token_stats",
    "compare_encoders",
    "enable_progress",
    "disable_progress",
]
