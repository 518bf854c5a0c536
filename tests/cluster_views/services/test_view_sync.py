from __future__ import annotations

import pytest

from cluster_views.core.exceptions import ViewUpdateFailure
from cluster_views.core.view_registry import ViewRegistry
from cluster_views.services.view_sync import SyncState, ViewSynchronizer
from tests.cluster_views.helpers import RecordingView, make_records


def _make_registry(*views):
    registry = ViewRegistry()
    for view in views:
        registry.register(view)
    return registry


def _color(record):
    return "#000000"


def test_color_target_call_order():
    colored = RecordingView("colored")
    plain = RecordingView("plain")
    sync = ViewSynchronizer(_make_registry(colored, plain))

    states = sync.sync(
        make_records(),
        {"colored": ["cluster"], "plain": []},
        color_fn=_color,
        color_targets={"colored"},
    )

    assert colored.calls == ["set_data", "render", "create_axes", "set_color", "hide_axis", "render"]
    assert plain.calls == ["set_data", "render", "create_axes", "hide_axis", "render"]
    assert states == {"colored": SyncState.RENDERED, "plain": SyncState.RENDERED}


def test_views_get_data_hidden_axes_and_colors():
    colored = RecordingView("colored")
    plain = RecordingView("plain")
    plain.set_color(None)
    records = make_records()

    ViewSynchronizer(_make_registry(colored, plain)).sync(
        records,
        {"colored": ["name"], "plain": []},
        color_fn=_color,
        color_targets={"colored"},
    )

    assert colored.records == records
    assert colored.axes == ["a", "b", "name"]
    assert colored.visible_axes == ["a", "b"]
    assert colored.color_fn is _color
    assert plain.color_fn is None
    # final render runs with axis animation disabled
    assert colored.axis_duration == 0


def test_failure_aborts_without_rollback():
    first = RecordingView("first")
    broken = RecordingView("broken", fail_on="create_axes")
    last = RecordingView("last")
    sync = ViewSynchronizer(_make_registry(first, broken, last))

    with pytest.raises(ViewUpdateFailure) as err:
        sync.sync(make_records(), {}, color_fn=_color, color_targets={"first", "broken", "last"})

    assert err.value.view_id == "broken"
    assert err.value.step == "create_axes"
    assert isinstance(err.value.__cause__, RuntimeError)

    assert sync.states["first"] == SyncState.RENDERED
    assert sync.states["broken"] == SyncState.DATA_LOADED
    assert sync.states["last"] == SyncState.IDLE
    assert last.calls == []
