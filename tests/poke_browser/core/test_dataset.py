from poke_browser.core.dataset import Dataset
from poke_browser.core.record import Record


def _make_dataset() -> Dataset:
    return Dataset(
        name="TestDataset",
        records=[
            Record("Vulpix", "Fire", 38, 41, 40, 50, 65, 65),
            Record("Abra", "Psychic", 25, 20, 15, 105, 55, 90),
            Record("Moltres", "Fire", 90, 100, 90, 125, 85, 90, is_legendary=True),
        ],
    )


def test_types_and_palette_domain_are_sorted():
    ds = _make_dataset()

    assert ds.types == ["Fire", "Psychic"]
    assert ds.palette.domain == ("Fire", "Psychic")


def test_names_for_is_sorted_and_skips_unknown_ids():
    ds = _make_dataset()

    assert ds.names_for({"Moltres_Fire", "Abra_Psychic", "Nope_None"}) == ["Abra", "Moltres"]


def test_legendary_counts():
    assert _make_dataset().legendary_counts() == (2, 1)


def test_to_frame_has_one_row_per_record():
    df = _make_dataset().to_frame()

    assert list(df["name"]) == ["Vulpix", "Abra", "Moltres"]
    assert list(df["id"]) == ["Vulpix_Fire", "Abra_Psychic", "Moltres_Fire"]


def test_empty_dataset_frame_keeps_columns():
    df = Dataset(name="empty").to_frame()

    assert df.empty
    assert "id" in df.columns
