from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from nucfreq.core.normalized import NormalizedNucleotideCount
from nucfreq.core.nucleotide import NUCLEOTIDES, Nucleotide
from nucfreq.exceptions import InputFormatError, NormalizationError
from nucfreq.logging_utils import get_logger

logger = get_logger("counts")

FACTOR_MODES = ("total", "length")


@dataclass(frozen=True)
class NucleotideCount:
    """Raw A/C/G/T counts. ``skipped`` holds every other symbol seen."""

    a: int = 0
    c: int = 0
    g: int = 0
    t: int = 0
    skipped: int = 0

    @classmethod
    def from_mapping(cls, counts: Mapping[Any, int]) -> "NucleotideCount":
        """
        Keys may be Nucleotide members or one-letter symbols; missing bases
        count 0. Counts must be ints, and each base may appear only once
        ('a' and 'A' name the same base).
        """
        parsed = {}
        for k, v in counts.items():
            field = Nucleotide.parse(k).name.lower()
            if isinstance(v, bool) or not isinstance(v, int):
                raise InputFormatError(f"Count for {k!r} must be an integer, got {v!r}")
            if field in parsed:
                raise InputFormatError(f"Duplicate count for nucleotide {field.upper()}")
            parsed[field] = v
        return cls(**parsed)

    @classmethod
    def from_sequence(cls, seq: str) -> "NucleotideCount":
        """
        Count bases in seq. Case-insensitive; whitespace is ignored and any
        non-ACGT symbol (N, U, IUPAC codes, gaps) goes to ``skipped``.
        """
        s = "".join((seq or "").split()).upper()
        tally = Counter(s)
        counts = {n.name.lower(): tally.get(n.value, 0) for n in NUCLEOTIDES}
        skipped = len(s) - sum(counts.values())
        if skipped:
            logger.debug(f"Skipped {skipped} non-ACGT symbol(s) out of {len(s)}")
        return cls(skipped=skipped, **counts)

    def __getitem__(self, nucleotide: Any) -> int:
        return getattr(self, Nucleotide.parse(nucleotide).name.lower())

    @property
    def total(self) -> int:
        return self.a + self.c + self.g + self.t

    @property
    def length(self) -> int:
        return self.total + self.skipped

    def as_dict(self) -> dict:
        return {n.value: self[n] for n in NUCLEOTIDES}

    def factor(self, mode: str = "total") -> int:
        if mode == "total":
            return self.total
        if mode == "length":
            return self.length
        raise NormalizationError(
            f"Unknown normalization mode: {mode!r} (expected one of {', '.join(FACTOR_MODES)})"
        )

    def normalize(self, factor: Optional[int] = None) -> NormalizedNucleotideCount:
        if factor is None:
            factor = self.total
        return NormalizedNucleotideCount.from_counts(self, factor)
