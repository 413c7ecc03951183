import logging
import math

import pandas as pd
import pytest

from poke_browser.core.dataset_loader import coerce_stat, load_dataset, parse_legendary, records_from_frame
from poke_browser.core.exceptions import DatasetSchemaError

HEADER = "Name,Type_1,HP,Attack,Defense,Sp_Atk,Sp_Def,Speed,isLegendary\n"


def _write_csv(tmp_path, body: str, header: str = HEADER, name: str = "pokemon.csv"):
    path = tmp_path / name
    path.write_text(header + body)
    return path


def test_load_dataset_converts_types_and_keeps_row_order(tmp_path):
    path = _write_csv(
        tmp_path,
        "Charmander,Fire,39,52,43,60,50,65,False\n"
        "Bulbasaur,Grass,45,49,49,65,65,45,False\n"
        "Mewtwo,Psychic,106,110,90,154,90,130,True\n",
    )

    ds = load_dataset(path)

    assert ds.name == "pokemon"
    assert ds.source == str(path)
    assert [r.name for r in ds.records] == ["Charmander", "Bulbasaur", "Mewtwo"]

    mewtwo = ds.records[2]
    assert mewtwo.hp == 106
    assert isinstance(mewtwo.attack, int)
    assert mewtwo.special_attack == 154
    assert mewtwo.is_legendary is True
    assert ds.records[0].is_legendary is False


def test_record_id_is_name_underscore_type(tmp_path):
    path = _write_csv(
        tmp_path,
        "Pikachu,Electric,35,55,40,50,50,90,False\n"
        "Pikachu,Electric,36,56,41,51,51,91,False\n"
        "Pikachu,Normal,35,55,40,50,50,90,False\n",
    )

    ds = load_dataset(path)

    for r in ds.records:
        assert r.id == r.name + "_" + r.primary_type

    # Same name + type collide; different type does not
    assert ds.records[0].id == ds.records[1].id == "Pikachu_Electric"
    assert ds.records[2].id == "Pikachu_Normal"
    assert ds.duplicate_ids() == ["Pikachu_Electric"]
    assert len(ds.by_id["Pikachu_Electric"]) == 2


def test_duplicate_ids_are_logged_not_fatal(tmp_path, caplog):
    path = _write_csv(
        tmp_path,
        "Pikachu,Electric,35,55,40,50,50,90,False\n"
        "Pikachu,Electric,36,56,41,51,51,91,False\n",
    )

    with caplog.at_level(logging.WARNING):
        ds = load_dataset(path)

    assert len(ds) == 2
    assert any("not unique" in rec.getMessage() for rec in caplog.records)


def test_non_numeric_stats_become_nan(tmp_path):
    path = _write_csv(tmp_path, "Missingno,Bird,abc,12px,,33,?,0x10,False\n")

    r = load_dataset(path).records[0]

    assert math.isnan(r.hp)
    assert math.isnan(r.attack)
    # empty cell coerces to 0
    assert r.defense == 0
    assert r.special_attack == 33
    assert math.isnan(r.special_defense)
    assert r.speed == 16


def test_absent_stat_column_gives_nan():
    df = pd.DataFrame(
        {
            "Name": ["Ditto"],
            "Type_1": ["Normal"],
            "HP": ["48"],
            "Attack": ["48"],
            "Defense": ["48"],
            "Sp_Atk": ["48"],
            "Sp_Def": ["48"],
            "isLegendary": ["False"],
        }
    )

    r = records_from_frame(df)[0]

    assert r.hp == 48
    assert math.isnan(r.speed)


def test_absent_legendary_column_means_not_legendary():
    df = pd.DataFrame({"Name": ["Ditto"], "Type_1": ["Normal"], "HP": ["48"]})

    assert records_from_frame(df)[0].is_legendary is False


def test_missing_required_column_raises(tmp_path):
    path = _write_csv(tmp_path, "Grass,45\n", header="Type_1,HP\n")

    with pytest.raises(DatasetSchemaError, match="Name"):
        load_dataset(path)


def test_unreadable_source_raises(tmp_path):
    with pytest.raises(DatasetSchemaError):
        load_dataset(tmp_path / "does_not_exist.csv")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        (" 7 ", 7),
        ("", 0),
        ("+5", 5),
        ("-3", -3),
        ("1.5", 1.5),
        ("1e2", 100),
        (".5", 0.5),
        ("0x1A", 26),
        ("0b11", 3),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_coerce_stat_parses_numbers(raw, expected):
    assert coerce_stat(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["abc", "12px", "1_000", "inf", "nan", "1,5", None, "１２", "١٢", "0x１"],
)
def test_coerce_stat_non_numeric_is_nan(raw):
    assert math.isnan(coerce_stat(raw))


def test_coerce_stat_integral_values_are_ints():
    assert isinstance(coerce_stat("45"), int)
    assert isinstance(coerce_stat("45.0"), int)
    assert isinstance(coerce_stat("45.5"), float)


@pytest.mark.parametrize(
    "raw, expected",
    [("True", True), ("true", False), ("TRUE", False), (" True", False), ("False", False), ("", False), (None, False)],
)
def test_parse_legendary_exact_token(raw, expected):
    assert parse_legendary(raw) is expected
