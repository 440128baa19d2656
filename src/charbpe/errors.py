"""Custom exception hierarchy for charbpe errors.

Malformed tokenization input never raises: unknown characters, unresolvable
ids and non-string corpora all map to fallback values. These exceptions cover
misuse of the surrounding API instead.
"""


class CharBPEError(Exception):
    """Base exception for all charbpe errors."""


class ModeError(CharBPEError):
    """Raised when an encode mode name cannot be resolved."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available_modes: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available_modes}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available_modes = available_modes


class TrainingInProgressError(CharBPEError):
    """Raised when a second training run is started on a busy tokenizer."""

    def __init__(self, message: str, *, vocab_size: int | None = None) -> None:
        """Initialize with the vocab size of the active run appended to the message."""
        if vocab_size is not None:
            message = f"{message} (vocab size: {vocab_size})"
        super().__init__(message)
        self.vocab_size = vocab_size


class EncoderReleasedError(CharBPEError):
    """Raised when an external encoder is used after it has been released."""

    def __init__(self, message: str, *, model_name: str | None = None) -> None:
        if model_name:
            message = f"{message} (model: {model_name})"
        super().__init__(message)
        self.model_name = model_name
