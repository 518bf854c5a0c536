from __future__ import annotations

import pytest

from cluster_views.core.view_registry import ViewRegistry
from cluster_views.views import ParcoordsView, ScatterView


def test_registry_keeps_registration_order():
    registry = ViewRegistry()
    registry.register(ScatterView("b"))
    registry.register(ParcoordsView("a"))
    registry.register(ScatterView("c"))

    assert registry.ids() == ["b", "a", "c"]
    assert [v.id for v in registry] == ["b", "a", "c"]
    assert len(registry) == 3
    assert "a" in registry


def test_registry_rejects_duplicates_and_non_views():
    registry = ViewRegistry()
    registry.register(ScatterView("a"))

    with pytest.raises(ValueError):
        registry.register(ParcoordsView("a"))

    with pytest.raises(TypeError):
        registry.register(object())


def test_registry_get_unknown_raises_key_error():
    registry = ViewRegistry()
    with pytest.raises(KeyError):
        registry.get("missing")
