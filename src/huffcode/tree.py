from collections.abc import Iterator
from typing import Self

from loguru import logger

from .codebook import CodeBook
from .errors import MalformedSequenceError
from .utils.bitsequence import BitSequence
from .utils.log import setup_logger


class Node:
    def __init__(self, symbol: str | None = None, zero: Self | None = None, one: Self | None = None) -> None:
        self.symbol = symbol
        self.zero = zero
        self.one = one

    @classmethod
    def leaf(cls, symbol: str) -> Self:
        return cls(symbol)

    @classmethod
    def internal(cls, zero: Self, one: Self) -> Self:
        return cls(None, zero, one)

    def child(self, bit: int) -> Self | None:
        return self.one if bit else self.zero

    def is_leaf(self) -> bool:
        return (self.symbol is not None) and (self.zero is None) and (self.one is None)

    def is_internal(self) -> bool:
        return (self.symbol is None) and (self.zero is not None) and (self.one is not None)

    def is_valid_node(self) -> bool:
        return self.is_leaf() or self.is_internal()

    # Checks this node and all of its descendants.
    def is_valid_tree(self) -> bool:
        stack = [self]
        while stack:
            node = stack.pop()
            if not node.is_valid_node():
                return False
            if node.is_internal():
                stack.append(node.one)
                stack.append(node.zero)
        return True


class CodeTree:
    """Binary trie of a prefix-free code, used for decoding.

    Each edge is one bit (``zero`` for 0, ``one`` for 1). In a valid tree every
    node is either a leaf holding a symbol or an internal node with both
    children. ``put`` does not enforce this; ``is_valid`` reports it.
    """

    def __init__(self, root: Node | None = None, is_logging: bool = False) -> None:
        self._is_logging = is_logging
        setup_logger(is_logging)
        # An empty placeholder root is not valid until something is put.
        self._root = root if root is not None else Node()

    @classmethod
    def from_root(cls, root: Node, is_logging: bool = False) -> Self:
        return cls(root, is_logging=is_logging)

    @classmethod
    def from_code_book(cls, code_book: CodeBook, is_logging: bool | None = None) -> Self:
        # Follows the code book unless told otherwise.
        if is_logging is None:
            is_logging = code_book.is_logging
        code_tree = cls(is_logging=is_logging)
        # Symbols are inserted in ascending order.
        for symbol, sequence in code_book.items():
            code_tree.put(sequence, symbol)
        logger.opt(lazy=True).info(
            "Built a code tree of {} symbols (height: {})", lambda: len(code_book), lambda: code_tree.height
        )
        return code_tree

    @property
    def root(self) -> Node:
        return self._root

    @property
    def height(self) -> int:
        height = 0
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            for child in (node.zero, node.one):
                if child is not None:
                    stack.append((child, depth + 1))
        return height

    def is_valid(self) -> bool:
        return self._root.is_valid_tree()

    def put(self, sequence: BitSequence, symbol: str) -> None:
        current_node = self._root
        for bit in sequence:
            next_node = current_node.child(bit)
            if next_node is None:
                # Create a intermediate (maybe leaf) node
                next_node = Node()
                if bit:
                    current_node.one = next_node
                else:
                    current_node.zero = next_node
            current_node = next_node

        if current_node.zero is not None or current_node.one is not None:
            logger.debug(f"Symbol {symbol!r} placed on an inner node at {sequence}")
        elif current_node.symbol is not None:
            logger.debug(f"Symbol {current_node.symbol!r} at {sequence} replaced by {symbol!r}")
        # Set the symbol to the leaf node
        current_node.symbol = symbol

    def decode(self, sequence: BitSequence) -> str:
        decoded: list[str] = []
        current_node = self._root
        for offset, bit in enumerate(sequence):
            next_node = current_node.child(bit)
            if next_node is None:
                raise MalformedSequenceError(f"No branch for bit {bit} at offset {offset}", offset)
            current_node = next_node
            if current_node.is_leaf():
                decoded.append(current_node.symbol)
                current_node = self._root

        if current_node is not self._root:
            raise MalformedSequenceError("The sequence ends in the middle of a codeword", len(sequence))
        return "".join(decoded)

    # Depth-first, zero branch before one branch.
    def codes(self) -> Iterator[tuple[str, BitSequence]]:
        stack: list[tuple[Node, tuple[int, ...]]] = [(self._root, ())]
        while stack:
            node, path = stack.pop()
            if node.symbol is not None:
                yield node.symbol, BitSequence(path)
            if node.one is not None:
                stack.append((node.one, path + (1,)))
            if node.zero is not None:
                stack.append((node.zero, path + (0,)))

    def to_code_book(self) -> CodeBook:
        return CodeBook.from_items(list(self.codes()), is_logging=self._is_logging)

    def print(self) -> None:
        def print_tree(node: Node | None, start_depth: int) -> None:
            if node is not None:
                print_tree(node.one, start_depth + 1)
                print(f'{" " * 4 * start_depth} -> [{node.symbol}]')
                print_tree(node.zero, start_depth + 1)

        print_tree(self._root, 0)
