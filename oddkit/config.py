"""
OddkitConfig: Project-level defaults for oddkit tooling.

This module provides:

- find_config_file: Nearest .oddkit.toml in a directory or its parents
- OddkitConfig: Resolved defaults (seed, sampling method, trials, alpha)

Configuration is loaded from the ``[oddkit]`` table of `.oddkit.toml` with
optional `.oddkit.local.toml` overrides. The resolution order is:

    built-in defaults → .oddkit.toml → .oddkit.local.toml → ODDKIT_SEED

Example:
    >>> config = OddkitConfig.load()
    >>> config.seed
    1337
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from oddkit.sampling import SAMPLING_METHODS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".oddkit.toml"
LOCAL_CONFIG_FILENAME = ".oddkit.local.toml"
SEED_ENV_VAR = "ODDKIT_SEED"
KNOWN_KEYS = frozenset({"seed", "method", "trials", "alpha"})


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest `.oddkit.toml` in *start_dir* (default: cwd) or its parents."""
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _parse_seed(raw: Any, source: str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"Invalid seed in {source}: {raw!r}")
    try:
        # Accept "0x..." strings as well as plain integers.
        return int(raw, 0) if isinstance(raw, str) else int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid seed in {source}: {raw!r}") from None


# ---------------------------------------------------------------------------
# Config object
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OddkitConfig:
    """
    Resolved oddkit defaults.

    Attributes:
        seed: Default seed for commands; ``None`` means seed from entropy.
        method: Default sampling method ("lemire" or "modulo").
        trials: Default number of rolls for ``oddkit roll``.
        alpha: Default significance level for ``oddkit check``.
        source: Path of the config file used, if any.
    """

    seed: int | None = None
    method: str = "lemire"
    trials: int = 1_000_000
    alpha: float = 0.001
    source: Path | None = None

    def __post_init__(self) -> None:
        if self.method not in SAMPLING_METHODS:
            raise ValueError(
                f"Unknown sampling method {self.method!r}. "
                f"Available methods: {', '.join(SAMPLING_METHODS)}"
            )
        if self.trials < 1:
            raise ValueError(f"trials must be >= 1, got {self.trials}")
        if not 0.0 < self.alpha < 1.0:
            raise ValueError(f"alpha must be in (0, 1), got {self.alpha}")

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        local_overrides: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
        source: Path | None = None,
    ) -> OddkitConfig:
        """
        Build a config from parsed TOML data.

        Args:
            data: Parsed base config file.
            local_overrides: Parsed local override file. Keys in its
                ``[oddkit]`` table replace those of *data*.
            environ: Environment mapping (default: ``os.environ``).
            source: Path of the base config file, for reporting.
        """
        section = {**data.get("oddkit", {}), **(local_overrides or {}).get("oddkit", {})}
        unknown = sorted(section.keys() - KNOWN_KEYS)
        if unknown:
            logger.warning("Ignoring unknown [oddkit] keys: %s", ", ".join(unknown))
        environ = os.environ if environ is None else environ

        seed: int | None = None
        if "seed" in section:
            seed = _parse_seed(section["seed"], str(source or CONFIG_FILENAME))
        env_seed = environ.get(SEED_ENV_VAR)
        if env_seed:
            seed = _parse_seed(env_seed, SEED_ENV_VAR)

        return cls(
            seed=seed,
            method=section.get("method", cls.method),
            trials=int(section.get("trials", cls.trials)),
            alpha=float(section.get("alpha", cls.alpha)),
            source=source,
        )

    @classmethod
    def load(
        cls,
        start_dir: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> OddkitConfig:
        """
        Find and load configuration.

        Walks up from *start_dir* (default: cwd) to locate `.oddkit.toml`.
        Missing files are not an error: built-in defaults (and
        ``ODDKIT_SEED``) apply.

        Raises:
            ValueError: If a config value is invalid.
            tomllib.TOMLDecodeError: If a config file is not valid TOML.
        """
        config_path = find_config_file(start_dir)
        if config_path is None:
            logger.debug("No %s found; using defaults", CONFIG_FILENAME)
            return cls.from_dict({}, environ=environ)

        logger.debug("Loading config from %s", config_path)
        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        local_overrides: dict[str, Any] = {}
        local_path = config_path.parent / LOCAL_CONFIG_FILENAME
        if local_path.is_file():
            logger.debug("Applying local overrides from %s", local_path)
            with open(local_path, "rb") as f:
                local_overrides = tomllib.load(f)

        return cls.from_dict(
            data, local_overrides=local_overrides, environ=environ, source=config_path
        )
