from pathlib import Path
import yaml

from nucfreq.core.counts import FACTOR_MODES
from nucfreq.exceptions import ConfigError

DEFAULT_CONFIG = {
    "factor": "total",
    "factor_value": None,
    "log_file": None,
    "verbose": False,
}


def _check_values(cfg: dict) -> None:
    factor_value = cfg.get("factor_value")
    # bool is an int subclass; `factor_value: true` must not mean 1
    if factor_value is not None and (isinstance(factor_value, bool) or not isinstance(factor_value, int)):
        raise ConfigError(f"factor_value must be an integer, got {factor_value!r}")
    if "factor" in cfg and cfg["factor"] not in FACTOR_MODES:
        raise ConfigError(
            f"factor must be one of {', '.join(FACTOR_MODES)}, got {cfg['factor']!r}"
        )
    if "verbose" in cfg and not isinstance(cfg["verbose"], bool):
        raise ConfigError(f"verbose must be true or false, got {cfg['verbose']!r}")
    log_file = cfg.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError(f"log_file must be a path string, got {log_file!r}")


def load_config(path: str) -> dict:
    """Read a YAML config, check its values and merge it over DEFAULT_CONFIG."""
    p = Path(path)
    if not p.is_file():
        raise ConfigError(f"Config not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Config is not valid YAML: {p}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Config could not be read: {p}: {e}") from e
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError("Config YAML must parse to a mapping/object.")

    unknown = sorted(str(k) for k in set(cfg) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
    _check_values(cfg)

    merged = dict(DEFAULT_CONFIG)
    merged.update(cfg)
    return merged
