from __future__ import annotations

from pathlib import Path
from typing import Tuple, Union

from Bio import SeqIO

from nucfreq.exceptions import InputFormatError
from nucfreq.logging_utils import get_logger

logger = get_logger("io")


def read_sequence_text(text: str) -> str:
    """Join inline sequence text, dropping whitespace and newlines."""
    s = "".join((text or "").split()).upper()
    if not s:
        raise InputFormatError("Empty sequence")
    return s


def load_sequence(path: Union[str, Path]) -> Tuple[str, str]:
    """
    Load ONE sequence and return (record_id, sequence).

    FASTA input (first non-blank character '>') is parsed with Bio.SeqIO and
    only the first record is used. Anything else is read as plain sequence
    text and named after the file stem.
    """
    p = Path(path)
    if not p.exists():
        raise InputFormatError(f"Sequence file not found: {p}")
    if not p.is_file():
        raise InputFormatError(f"Sequence path is not a file: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Sequence file could not be read: {p}: {e}") from e
    if not text.strip():
        raise InputFormatError(f"Sequence file is empty: {p}")

    if not text.lstrip().startswith(">"):
        return p.stem, read_sequence_text(text)

    records = SeqIO.parse(str(p), "fasta")
    first = next(records, None)
    if first is None:
        raise InputFormatError(f"No FASTA records in {p}")
    extra = sum(1 for _ in records)
    if extra:
        logger.warning(f"{p} holds {extra + 1} records; only '{first.id}' is used")

    seq = str(first.seq).strip().upper()
    if not seq:
        raise InputFormatError(f"FASTA record '{first.id}' has an empty sequence")
    return first.id, seq
