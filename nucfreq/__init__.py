__version__ = "0.1.0"

from nucfreq.core.nucleotide import Nucleotide
from nucfreq.core.counts import NucleotideCount
from nucfreq.core.normalized import NormalizedNucleotideCount

__all__ = [
    "Nucleotide",
    "NucleotideCount",
    "NormalizedNucleotideCount",
    "__version__",
]
