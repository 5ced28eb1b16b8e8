# nucfreq/cli.py

import argparse

from nucfreq import __version__
from nucfreq.core.counts import FACTOR_MODES


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nucfreq",
        description="Normalized A/C/G/T frequencies, max-frequency bases and Shannon entropy of one DNA sequence.",
    )
    parser.add_argument("--version", action="version", version=f"nucfreq {__version__}")

    # Input
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--sequence", help="Input FASTA (first record is used) or plain sequence file.")
    src.add_argument("--seq", help="Inline DNA sequence.")

    parser.add_argument("--config", default=None, help="Optional YAML config file.")

    # Normalization; unset flags fall back to the config, then to defaults
    norm = parser.add_mutually_exclusive_group()
    norm.add_argument(
        "--factor",
        default=None,
        choices=list(FACTOR_MODES),
        help="Divide by the A/C/G/T total (default) or by the full sequence length.",
    )
    norm.add_argument("--factor-value", type=int, default=None, help="Explicit integer normalization factor.")

    # Logging
    parser.add_argument("--log-file", default=None, help="Optional log file path.")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging.")
    return parser


def get_cli_args(argv=None):
    return _build_parser().parse_args(argv)
