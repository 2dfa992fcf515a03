from .codebook import CodeBook
from .errors import HuffcodeError, MalformedSequenceError, UnknownSymbolError
from .tree import CodeTree, Node
from .utils.bitsequence import BitSequence

__all__ = [
    "BitSequence",
    "CodeBook",
    "CodeTree",
    "HuffcodeError",
    "MalformedSequenceError",
    "Node",
    "UnknownSymbolError",
]
