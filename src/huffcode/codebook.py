from collections.abc import Callable, Iterator
from typing import Self

from loguru import logger
from toolz import count, pluck

from .errors import UnknownSymbolError
from .utils.bitsequence import BitSequence
from .utils.log import setup_logger


class _BookNode:
    def __init__(self, symbol: str, sequence: BitSequence) -> None:
        self.symbol = symbol
        self.sequence = sequence
        self.left: Self | None = None
        self.right: Self | None = None


class CodeBook:
    """Maps each symbol to its codeword.

    The entries are kept in an unbalanced binary search tree ordered by symbol.
    The first codeword added for a symbol is permanent: adding the same symbol
    again is a no-op.
    """

    def __init__(self, is_logging: bool = False) -> None:
        self._is_logging = is_logging
        setup_logger(is_logging)
        self._root: _BookNode | None = None

    @property
    def is_logging(self) -> bool:
        return self._is_logging

    @classmethod
    def from_items(cls, items: dict[str, BitSequence] | list[tuple[str, BitSequence]], is_logging: bool = False) -> Self:
        book = cls(is_logging=is_logging)
        pairs = items.items() if isinstance(items, dict) else items
        for symbol, sequence in pairs:
            book.add(symbol, sequence)
        return book

    def add(self, symbol: str, sequence: BitSequence) -> None:
        if self._root is None:
            self._root = _BookNode(symbol, sequence)
            return

        current_node = self._root
        while True:
            if symbol < current_node.symbol:
                if current_node.left is None:
                    current_node.left = _BookNode(symbol, sequence)
                    return
                current_node = current_node.left
            elif symbol > current_node.symbol:
                if current_node.right is None:
                    current_node.right = _BookNode(symbol, sequence)
                    return
                current_node = current_node.right
            else:
                # Already present, the first sequence wins.
                return

    def _find(self, symbol: str) -> _BookNode | None:
        current_node = self._root
        while current_node is not None:
            if symbol < current_node.symbol:
                current_node = current_node.left
            elif symbol > current_node.symbol:
                current_node = current_node.right
            else:
                return current_node
        return None

    def contains(self, symbol: str) -> bool:
        return self._find(symbol) is not None

    def contains_all(self, text: str) -> bool:
        return all(map(self.contains, text))

    def lookup(self, symbol: str) -> BitSequence | None:
        node = self._find(symbol)
        return None if node is None else node.sequence

    def encode(self, text: str, strict: bool = False) -> BitSequence:
        encoded = BitSequence()
        for position, symbol in enumerate(text):
            sequence = self.lookup(symbol)
            if sequence is None:
                if strict:
                    raise UnknownSymbolError(symbol, position)
                logger.warning(f"Skipped unknown symbol {symbol!r} at position {position}")
                continue
            encoded.extend(sequence)
        return encoded

    # In-order traversal, so the symbols come out in ascending order.
    def items(self) -> Iterator[tuple[str, BitSequence]]:
        stack: list[_BookNode] = []
        current_node = self._root
        while stack or current_node is not None:
            while current_node is not None:
                stack.append(current_node)
                current_node = current_node.left
            current_node = stack.pop()
            yield current_node.symbol, current_node.sequence
            current_node = current_node.right

    def symbols(self) -> Iterator[str]:
        return pluck(0, self.items())

    def for_each_symbol(self, visitor: Callable[[str], None]) -> None:
        for symbol in self.symbols():
            visitor(symbol)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.contains(symbol)

    def __iter__(self) -> Iterator[str]:
        return self.symbols()

    def __len__(self) -> int:
        return count(self.items())

    def __str__(self) -> str:
        return ", ".join(f"{symbol}={sequence}" for symbol, sequence in self.items())
