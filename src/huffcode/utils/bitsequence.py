from collections.abc import Iterable, Iterator
from typing import Self, overload

import numpy as np


class BitSequence:
    def __init__(self, bits: Iterable[int | bool] = ()) -> None:
        self._bits: list[int] = [1 if bit else 0 for bit in bits]

    # e.g. "0 10 11" -> 01011
    @classmethod
    def from_string(cls, text: str) -> Self:
        bits = []
        for char in text:
            match char:
                case "0":
                    bits.append(0)
                case "1":
                    bits.append(1)
                case _ if char.isspace():
                    continue
                case _:
                    raise ValueError(f"Invalid bit character: {char!r}")
        return cls(bits)

    # Bits are unpacked from the MSB to the LSB of each byte.
    @classmethod
    def from_bytes(cls, data: bytes, length: int | None = None) -> Self:
        unpacked = np.unpackbits(np.frombuffer(data, dtype=np.uint8))
        if length is not None:
            if length > unpacked.size:
                raise ValueError(f"Requested {length} bits, but only {unpacked.size} are available")
            unpacked = unpacked[:length]
        return cls(unpacked.tolist())

    # The final byte is padded with zeros.
    def to_bytes(self) -> bytes:
        return np.packbits(np.array(self._bits, dtype=np.uint8)).tobytes()

    def append(self, bit: int | bool) -> None:
        self._bits.append(1 if bit else 0)

    def extend(self, other: Iterable[int | bool]) -> None:
        self._bits.extend(1 if bit else 0 for bit in other)

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, BitSequence):
            return NotImplemented
        return type(self)(self._bits + other._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> Self: ...

    def __getitem__(self, index: int | slice) -> int | Self:
        if isinstance(index, slice):
            return type(self)(self._bits[index])
        return self._bits[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSequence):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(map(str, self._bits))

    def __repr__(self) -> str:
        return f"BitSequence('{self}')"
