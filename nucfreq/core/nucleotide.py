from __future__ import annotations

from enum import Enum
from typing import Any

from nucfreq.exceptions import InvalidNucleotideError


class Nucleotide(Enum):
    """The four DNA bases. Iteration order is A, C, G, T."""

    A = "A"
    C = "C"
    G = "G"
    T = "T"

    @classmethod
    def parse(cls, symbol: Any) -> "Nucleotide":
        """
        Accept a Nucleotide member or a one-letter symbol (case-insensitive).
        Anything else raises InvalidNucleotideError.
        """
        if isinstance(symbol, cls):
            return symbol
        if isinstance(symbol, str):
            s = symbol.strip().upper()
            if s in cls.__members__:
                return cls[s]
        raise InvalidNucleotideError(f"Not a DNA nucleotide: {symbol!r}")

    def __str__(self) -> str:
        return self.value


NUCLEOTIDES = tuple(Nucleotide)
