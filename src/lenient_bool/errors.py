"""Exception types raised by the lenient boolean parser."""

_MESSAGE = "input is not a recognized boolean token"


class UnrecognizedTokenError(ValueError):
    """Raised when a token matches neither the truthy nor the falsy vocabulary.

    The error carries no payload: it does not echo the input and
    has no position information. Every instance compares equal to every other.
    ``args`` stays empty so the error pickles and copies like any other exception.
    """

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return _MESSAGE

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnrecognizedTokenError):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return hash(UnrecognizedTokenError)
