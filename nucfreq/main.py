import sys
from typing import Any, Dict, Optional

from nucfreq.cli import get_cli_args
from nucfreq.config import DEFAULT_CONFIG, load_config
from nucfreq.core.counts import NucleotideCount
from nucfreq.exceptions import NucfreqError
from nucfreq.io.sequences import load_sequence, read_sequence_text
from nucfreq.logging_utils import setup_logger
from nucfreq.report import build_report_row, format_report


def resolve_settings(args) -> Dict[str, Any]:
    """Config file values, overridden by any CLI flag that was given."""
    settings = load_config(args.config) if getattr(args, "config", None) else dict(DEFAULT_CONFIG)
    if getattr(args, "factor_value", None) is not None:
        settings["factor_value"] = args.factor_value
    elif getattr(args, "factor", None) is not None:
        settings["factor"] = args.factor
        settings["factor_value"] = None
    if getattr(args, "log_file", None):
        settings["log_file"] = args.log_file
    if getattr(args, "verbose", False):
        settings["verbose"] = True
    return settings


def run(args, settings: Dict[str, Any], logger) -> Dict[str, Any]:
    if getattr(args, "sequence", None):
        record_id, seq = load_sequence(args.sequence)
    else:
        record_id, seq = "inline", read_sequence_text(args.seq)
    logger.debug(f"[{record_id}] Loaded sequence of length {len(seq)}")

    counts = NucleotideCount.from_sequence(seq)
    factor = settings["factor_value"]
    if factor is None:
        factor = counts.factor(settings["factor"])
        logger.debug(f"[{record_id}] Normalizing by {settings['factor']}={factor}")
    else:
        logger.debug(f"[{record_id}] Normalizing by explicit factor {factor}")

    normalized = counts.normalize(factor)
    return build_report_row(record_id, counts, normalized)


def main(argv: Optional[list] = None) -> int:
    args = get_cli_args(argv)

    try:
        settings = resolve_settings(args)
    except NucfreqError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        logger = setup_logger(settings["log_file"], settings["verbose"])
    except OSError as e:
        print(f"ERROR: cannot open log file: {e}", file=sys.stderr)
        return 2
    logger.info("Starting nucfreq")

    try:
        row = run(args, settings, logger)
    except NucfreqError as e:
        logger.error(str(e))
        return 2

    print(format_report(row))
    logger.info("nucfreq finished successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
