from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from respect.core.config import RespectConfig
from respect.core.constants import ENV_FLOAT_PRECISION, ENV_MAX_DIFF, ENV_OPTIONS
from respect.core.options import Options, options_from_names

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"max_diff", "float_precision", "options"}


def _parse_int(raw: Any, *, field_name: str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{field_name} must be an integer")
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be an integer, got {raw!r}") from exc


def _parse_option_list(raw: Any, *, field_name: str) -> Options:
    if raw is None:
        return Options.NONE
    if isinstance(raw, str):
        raw = [part for part in raw.split(",") if part.strip()]
    if not isinstance(raw, list):
        raise ValueError(f"{field_name} must be a list of option names")
    return options_from_names([str(item) for item in raw])


def parse_config(data: Mapping[str, Any] | None) -> RespectConfig:
    if data is None:
        return RespectConfig()
    if not isinstance(data, Mapping):
        raise ValueError("respect config must be a mapping")
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown respect config key(s): {', '.join(map(str, unknown))}")

    defaults = RespectConfig()
    max_diff = data.get("max_diff")
    float_precision = data.get("float_precision")
    return RespectConfig(
        max_diff=_parse_int(max_diff, field_name="max_diff") if max_diff is not None else defaults.max_diff,
        float_precision=(
            _parse_int(float_precision, field_name="float_precision")
            if float_precision is not None
            else defaults.float_precision
        ),
        options=_parse_option_list(data.get("options"), field_name="options"),
    )


def load_config(path: Path) -> RespectConfig:
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return RespectConfig()
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return parse_config(loaded)


def apply_env_overrides(config: RespectConfig, environ: Mapping[str, str] | None = None) -> RespectConfig:
    env = os.environ if environ is None else environ
    updated = config

    max_diff_raw = env.get(ENV_MAX_DIFF)
    if max_diff_raw:
        updated = replace(updated, max_diff=_parse_int(max_diff_raw, field_name=ENV_MAX_DIFF))
    precision_raw = env.get(ENV_FLOAT_PRECISION)
    if precision_raw:
        updated = replace(updated, float_precision=_parse_int(precision_raw, field_name=ENV_FLOAT_PRECISION))
    options_raw = env.get(ENV_OPTIONS)
    if options_raw:
        updated = updated.with_options(_parse_option_list(options_raw, field_name=ENV_OPTIONS))

    if updated != config:
        logger.debug("respect config overridden from environment: %s", updated)
    return updated


def resolve_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> RespectConfig:
    base = load_config(path) if path is not None else RespectConfig()
    return apply_env_overrides(base, environ)


__all__ = [
    "RespectConfig",
    "apply_env_overrides",
    "load_config",
    "parse_config",
    "resolve_config",
]
