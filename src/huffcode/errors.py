class HuffcodeError(Exception):
    """Base class of the errors raised by huffcode."""


class MalformedSequenceError(HuffcodeError, ValueError):
    """The bit sequence cannot be decoded with the code tree.

    Raised when a bit leads to a missing child, or when the sequence stops
    in the middle of a codeword.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class UnknownSymbolError(HuffcodeError, KeyError):
    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(symbol)
        self.symbol = symbol
        self.position = position

    def __str__(self) -> str:
        return f"Symbol {self.symbol!r} at position {self.position} is not in the code book"
