from __future__ import annotations

from pathlib import Path

import pytest

from respect.config import apply_env_overrides, load_config, parse_config, resolve_config
from respect.core.config import RespectConfig
from respect.core.options import Options


def test_defaults() -> None:
    config = RespectConfig()
    assert config.max_diff == 10
    assert config.float_precision == 10
    assert config.options == Options.NONE


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValueError, match="max_diff"):
        RespectConfig(max_diff=0)
    with pytest.raises(ValueError, match="float_precision"):
        RespectConfig(float_precision=-1)


def test_with_options_accumulates() -> None:
    config = RespectConfig(options=Options.ORDER_MATTERS).with_options(Options.LENGTH_MATTERS)
    assert config.options == Options.ORDER_MATTERS | Options.LENGTH_MATTERS


def test_parse_config() -> None:
    config = parse_config({"max_diff": 3, "float_precision": "4", "options": ["order_matters", "length-matters"]})
    assert config == RespectConfig(
        max_diff=3,
        float_precision=4,
        options=Options.ORDER_MATTERS | Options.LENGTH_MATTERS,
    )
    assert parse_config(None) == RespectConfig()


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({"max_dif": 3}, "Unknown respect config key"),
        ({"max_diff": "many"}, "max_diff must be an integer"),
        ({"max_diff": True}, "max_diff must be an integer"),
        ({"options": {"order_matters": True}}, "options must be a list"),
        ({"options": ["sorted"]}, "Unknown option"),
    ],
)
def test_parse_config_errors(data: dict[str, object], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_config(data)


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "respect.yaml"
    path.write_text("max_diff: 5\noptions:\n  - zero_value_matters\n", encoding="utf-8")
    config = load_config(path)
    assert config.max_diff == 5
    assert config.options == Options.ZERO_VALUE_MATTERS


def test_load_config_empty_and_invalid(tmp_path: Path) -> None:
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == RespectConfig()

    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(listing)


def test_env_overrides() -> None:
    env = {
        "RESPECT_MAX_DIFF": "4",
        "RESPECT_FLOAT_PRECISION": "3",
        "RESPECT_OPTIONS": "order_matters, length_matters",
    }
    config = apply_env_overrides(RespectConfig(options=Options.ZERO_VALUE_MATTERS), env)
    assert config.max_diff == 4
    assert config.float_precision == 3
    assert config.options == Options.ORDER_MATTERS | Options.LENGTH_MATTERS | Options.ZERO_VALUE_MATTERS


def test_env_override_errors() -> None:
    with pytest.raises(ValueError, match="RESPECT_MAX_DIFF"):
        apply_env_overrides(RespectConfig(), {"RESPECT_MAX_DIFF": "lots"})


def test_resolve_config_reads_process_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "respect.yaml"
    path.write_text("max_diff: 7\n", encoding="utf-8")
    monkeypatch.setenv("RESPECT_FLOAT_PRECISION", "2")
    monkeypatch.delenv("RESPECT_MAX_DIFF", raising=False)
    monkeypatch.delenv("RESPECT_OPTIONS", raising=False)

    config = resolve_config(path)

    assert config == RespectConfig(max_diff=7, float_precision=2)
