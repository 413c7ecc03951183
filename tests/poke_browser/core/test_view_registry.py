import pytest

from poke_browser.core.dataset import Dataset
from poke_browser.core.layout import CanvasLayout, build_scales
from poke_browser.core.record import Record
from poke_browser.core.view_registry import ViewRegistry
from poke_browser.views import DonutView, ParallelView, ScatterView


def _make_registry() -> ViewRegistry:
    registry = ViewRegistry()
    registry.register(ScatterView)
    registry.register(DonutView)
    registry.register(ParallelView)
    return registry


def _make_inputs():
    ds = Dataset(name="TestDataset", records=[Record("Abra", "Psychic", 25, 20, 15, 105, 55, 90)])
    return ds, build_scales(ds.records, CanvasLayout(1200, 800))


def test_register_rejects_non_views_and_duplicates():
    registry = _make_registry()

    with pytest.raises(TypeError):
        registry.register(object)
    with pytest.raises(ValueError):
        registry.register(ScatterView)


def test_create_by_id():
    registry = _make_registry()
    ds, scales = _make_inputs()

    view = registry.create("donut", ds, scales)

    assert isinstance(view, DonutView)
    assert view.dataset is ds
    with pytest.raises(KeyError):
        registry.create("heatmap", ds, scales)


def test_create_interactive_skips_static_views_and_builds_fresh_instances():
    registry = _make_registry()
    ds, scales = _make_inputs()

    first = registry.create_interactive(ds, scales)
    second = registry.create_interactive(ds, scales)

    assert [v.id for v in first] == ["scatter", "parallel"]
    assert first[0] is not second[0]
    assert [cls.id for cls in registry.all_classes()] == ["scatter", "donut", "parallel"]
