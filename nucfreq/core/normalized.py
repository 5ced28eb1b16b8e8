from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

from nucfreq.core.nucleotide import NUCLEOTIDES, Nucleotide
from nucfreq.exceptions import NormalizationError

# Absolute tolerance under which two frequencies count as tied in max().
EQUALITY_TOLERANCE = 0.001


@dataclass(frozen=True)
class NormalizedNucleotideCount:
    """
    Nucleotide counts divided by a normalization factor.

    Values are not required to sum to 1; that depends on the factor the
    caller picked (usually the total count).
    """

    a: float
    c: float
    g: float
    t: float

    @classmethod
    def from_counts(cls, counts: Any, factor: int) -> "NormalizedNucleotideCount":
        """
        counts must support lookup by Nucleotide for all four bases.
        A zero factor raises NormalizationError; negative factors and
        negative counts are passed through unchecked.
        """
        if factor == 0:
            raise NormalizationError("Normalization factor must be non-zero")
        f = float(factor)
        return cls(*(counts[n] / f for n in NUCLEOTIDES))

    def __getitem__(self, nucleotide: Any) -> float:
        n = Nucleotide.parse(nucleotide)
        return getattr(self, n.name.lower())

    def get(self, nucleotide: Any) -> float:
        return self[nucleotide]

    def values(self) -> Tuple[float, float, float, float]:
        return (self.a, self.c, self.g, self.t)

    def items(self) -> Iterator[Tuple[Nucleotide, float]]:
        return zip(NUCLEOTIDES, self.values())

    def as_dict(self) -> dict:
        return {n.value: v for n, v in self.items()}

    def max(self) -> List[Tuple[Nucleotide, float]]:
        """
        Nucleotides with the (approximately) largest frequency.

        Single pass in A, C, G, T order. Each base is compared against the
        running maximum only: within EQUALITY_TOLERANCE it is appended as a
        tie, above it the result restarts from that base. Bases tied with an
        earlier, later-replaced maximum are therefore not carried over.
        """
        best = [(Nucleotide.A, self.a)]
        for n in NUCLEOTIDES[1:]:
            v = self[n]
            if abs(v - best[0][1]) < EQUALITY_TOLERANCE:
                best.append((n, v))
            elif v > best[0][1]:
                best = [(n, v)]
        return best

    def entropy(self) -> float:
        """Shannon entropy in bits over the stored values; zeros are skipped."""
        entropy = 0.0
        for v in self.values():
            if v > 0.0:
                entropy -= v * math.log2(v)
        return entropy
