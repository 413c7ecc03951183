from __future__ import annotations

import json
from pathlib import Path

import pytest

from poke_browser.config.loader import CONFIG_ROOT_ENV, DATA_SOURCE_ENV, is_url, load_global_config
from poke_browser.config.model import Margin
from poke_browser.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv(DATA_SOURCE_ENV, raising=False)
    monkeypatch.delenv(CONFIG_ROOT_ENV, raising=False)


def _write_global(root: Path, section) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps({"global": section}))
    return root


def test_load_global_config_reads_values(tmp_path):
    root = _write_global(
        tmp_path / "config",
        {
            "ui_title": "Dex",
            "subtitle": "Gen 1",
            "data_source": "data/pokemon.csv",
            "canvas": {"width": 1000, "height": 600, "margin": {"left": 50}},
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "Dex"
    assert cfg.subtitle == "Gen 1"
    assert cfg.config_root == root
    # relative paths resolve against the project directory
    assert cfg.data_source == (tmp_path / "data" / "pokemon.csv").resolve()
    assert cfg.canvas.width == 1000
    assert cfg.canvas.height == 600
    assert cfg.canvas.left_fraction == 0.4
    assert cfg.canvas.margin == Margin(top=40, right=20, bottom=40, left=50)


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_global_config(tmp_path / "nowhere")

    assert cfg.ui_title == "Pokemon Stat Browser"
    assert cfg.canvas.width == 1200
    assert cfg.canvas.height == 800


def test_config_root_from_env(tmp_path, monkeypatch):
    root = _write_global(tmp_path / "cfg", {"ui_title": "From env"})
    monkeypatch.setenv(CONFIG_ROOT_ENV, str(root))

    assert load_global_config().ui_title == "From env"


def test_data_source_env_override(tmp_path, monkeypatch):
    root = _write_global(tmp_path / "config", {"data_source": "data/pokemon.csv"})
    monkeypatch.setenv(DATA_SOURCE_ENV, "https://example.org/pokemon.csv")

    cfg = load_global_config(root)

    assert cfg.data_source == "https://example.org/pokemon.csv"


def test_absolute_data_source_is_kept(tmp_path):
    csv = tmp_path / "elsewhere" / "dex.csv"
    root = _write_global(tmp_path / "config", {"data_source": str(csv)})

    assert load_global_config(root).data_source == csv


def test_invalid_json_raises(tmp_path):
    root = tmp_path / "config"
    root.mkdir()
    (root / "global.json").write_text("{not json")

    with pytest.raises(ConfigError):
        load_global_config(root)


@pytest.mark.parametrize(
    "section",
    [
        ["not", "an", "object"],
        {"canvas": {"width": "wide"}},
        {"canvas": {"width": 0}},
        {"canvas": {"left_fraction": 1.5}},
        {"canvas": {"margin": "none"}},
        {"data_source": 5},
    ],
)
def test_bad_values_raise_config_error(tmp_path, section):
    root = _write_global(tmp_path / "config", section)

    with pytest.raises(ConfigError):
        load_global_config(root)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("https://example.org/a.csv", True),
        ("HTTP://example.org/a.csv", True),
        ("s3://bucket/a.csv", True),
        ("data/pokemon.csv", False),
        ("/abs/pokemon.csv", False),
    ],
)
def test_is_url(source, expected):
    assert is_url(source) is expected
