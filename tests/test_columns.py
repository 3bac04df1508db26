import logging

import pytest

import album_core.columns as columns
from album_core.models import ColumnConstraints, LayoutInstrumentation, LayoutOptions, Photo


def _squares(count):
    return [Photo(100, 100) for _ in range(count)]


def _total_width(layout, options):
    count = len(layout.columns_widths)
    return (
        sum(layout.columns_widths)
        + (count - 1) * options.spacing
        + 2 * options.padding * count
    )


def test_five_squares_in_two_columns():
    photos = _squares(5)
    options = LayoutOptions(container_width=500, columns=2)
    layout = columns.compute_columns_layout(photos, options)

    assert [len(column) for column in layout.columns_model] == [2, 3]
    assert layout.columns_widths == pytest.approx([300, 200])
    assert sum(layout.columns_widths) == pytest.approx(500)
    assert layout.columns_ratios == pytest.approx([0.5, 1 / 3])
    assert layout.columns_gaps == pytest.approx([0, 0])
    heights = [sum(e.layout.height for e in column) for column in layout.columns_model]
    assert heights == pytest.approx([600, 600])
    flattened = [entry.photo for column in layout.columns_model for entry in column]
    assert flattened == photos


def test_fewer_photos_than_columns_uses_one_column_each():
    photos = [Photo(100, 100), Photo(200, 100)]
    options = LayoutOptions(container_width=300, columns=3)
    layout = columns.compute_columns_layout(photos, options)

    assert [len(column) for column in layout.columns_model] == [1, 1]
    assert layout.columns_widths == pytest.approx([100, 200])
    for column in layout.columns_model:
        assert column[0].layout.height == pytest.approx(100)


def test_min_columns_appends_empty_columns():
    photos = _squares(2)
    options = LayoutOptions(
        container_width=400,
        columns=4,
        column_constraints=ColumnConstraints(min_columns=4),
    )
    layout = columns.compute_columns_layout(photos, options)

    assert [len(column) for column in layout.columns_model] == [1, 1, 0, 0]
    assert layout.columns_gaps == [0.0, 0.0, 0.0, 0.0]
    assert layout.columns_ratios == pytest.approx([1, 1, 1, 1])
    assert layout.columns_widths == pytest.approx([100, 100, 100, 100])
    assert layout.columns_model[0][0].layout.width == pytest.approx(100)


def test_widths_add_up_with_spacing_and_padding():
    photos = [
        Photo(1080, 800),
        Photo(1080, 1620),
        Photo(1080, 720),
        Photo(1080, 1440),
        Photo(1920, 1080),
        Photo(1080, 1080),
        Photo(800, 1080),
        Photo(1080, 607),
        Photo(1080, 1350),
    ]
    options = LayoutOptions(container_width=1000, spacing=12, padding=4, columns=3)
    layout = columns.compute_columns_layout(photos, options)

    assert len(layout.columns_model) == 3
    assert all(width > 0 for width in layout.columns_widths)
    assert _total_width(layout, options) == pytest.approx(1000)
    for column, width in zip(layout.columns_model, layout.columns_widths):
        for entry in column:
            assert entry.layout.width == pytest.approx(width)
            assert entry.layout.height == pytest.approx(width / entry.photo.aspect_ratio)


def test_fallback_reduces_column_count(caplog):
    caplog.set_level(logging.DEBUG, logger="album_core.columns")
    options = LayoutOptions(container_width=50, padding=10, columns=5)
    layout = columns.compute_columns_layout(_squares(10), options)

    assert [r.getMessage() for r in caplog.records] == [
        "columns: infeasible at 5 columns, retrying with 4",
        "columns: infeasible at 4 columns, retrying with 3",
        "columns: infeasible at 3 columns, retrying with 2",
    ]
    assert [len(column) for column in layout.columns_model] == [5, 5]
    assert layout.columns_widths == pytest.approx([5, 5])


def test_infeasible_container_returns_none_and_fires_hooks_once():
    events = []
    instrumentation = LayoutInstrumentation(
        on_start_layout_computation=lambda: events.append("start"),
        on_finish_layout_computation=lambda result: events.append(("finish", result)),
    )
    options = LayoutOptions(container_width=10, padding=10, columns=5)
    assert columns.compute_columns_layout(_squares(10), options, instrumentation) is None
    assert events == ["start", ("finish", None)]


def test_uniform_photos_step_down_as_container_narrows():
    photos = _squares(10)
    counts = []
    for width in (200, 120, 95, 60, 45, 30, 15):
        options = LayoutOptions(container_width=width, padding=10, columns=5)
        layout = columns.compute_columns_layout(photos, options)
        counts.append(0 if layout is None else len(layout.columns_model))
    assert counts[0] == 5
    assert counts[-1] == 0
    assert counts == sorted(counts, reverse=True)


def test_narrower_container_can_switch_partition_and_keep_more_columns():
    photos = [Photo(1448, 84), Photo(833, 484), Photo(290, 2402), Photo(2724, 250)]

    wide = columns.compute_columns_layout(
        photos, LayoutOptions(container_width=169, spacing=10, padding=15, columns=3)
    )
    narrow = columns.compute_columns_layout(
        photos, LayoutOptions(container_width=166, spacing=10, padding=15, columns=3)
    )

    # at 169 the only two-column split is [3, 1], whose first column is negative
    assert [len(column) for column in wide.columns_model] == [4]
    # at 166 the tall photo no longer reaches the last one, so [2, 2] wins
    assert [len(column) for column in narrow.columns_model] == [2, 2]
    assert narrow.columns_widths == pytest.approx([89.19, 6.81], abs=0.01)


def test_empty_input_yields_empty_layout():
    options = LayoutOptions(container_width=500, columns=3)
    layout = columns.compute_columns_layout([], options)
    assert layout.columns_model == []
    assert layout.columns_widths == []


def test_columns_are_deterministic():
    photos = [Photo(100, 100 + 17 * (i % 5)) for i in range(23)]
    options = LayoutOptions(container_width=900, spacing=8, columns=4)
    first = columns.compute_columns_layout(photos, options)
    second = columns.compute_columns_layout(photos, options)
    assert [len(c) for c in first.columns_model] == [len(c) for c in second.columns_model]
    assert first.columns_widths == second.columns_widths
