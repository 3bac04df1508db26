import os

import pytest

import album_core.settings as settings
from album_core.algorithms.shortest_path import find_shortest_path


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    monkeypatch.setenv(settings.SETTINGS_ENV, str(path))
    settings.load_settings.cache_clear()
    yield path
    settings.load_settings.cache_clear()


def test_defaults_when_file_missing(settings_file):
    assert settings.load_settings() == settings.DEFAULT_SETTINGS


def test_values_read_from_yaml(settings_file):
    settings_file.write_text(
        "row_tie_tolerance: 0.01\ncolumn_cutoff_factor: 2\nunknown: 5\n", encoding="utf-8"
    )
    loaded = settings.load_settings()

    assert loaded["row_tie_tolerance"] == pytest.approx(0.01)
    assert loaded["column_cutoff_factor"] == pytest.approx(2.0)
    assert loaded["masonry_epsilon"] == pytest.approx(settings.DEFAULT_SETTINGS["masonry_epsilon"])
    assert "unknown" not in loaded


def test_non_numeric_value_keeps_default(settings_file):
    settings_file.write_text("masonry_epsilon: wide\n", encoding="utf-8")
    assert settings.setting("masonry_epsilon") == pytest.approx(1.0)


def test_invalid_yaml_falls_back_to_defaults(settings_file):
    settings_file.write_text("row_tie_tolerance: [1, 2\n", encoding="utf-8")
    assert settings.load_settings() == settings.DEFAULT_SETTINGS


def test_row_tolerance_drives_search(settings_file):
    settings_file.write_text("row_tie_tolerance: 0\n", encoding="utf-8")
    edges = {0: {1: 50, 2: 60}, 1: {3: 150}, 2: {3: 139.5}}
    assert find_shortest_path(lambda node: edges.get(node, {}), 0, 3) == [0, 2, 3]


def test_default_file_ships_inside_package(monkeypatch):
    monkeypatch.delenv(settings.SETTINGS_ENV, raising=False)
    path = settings.settings_path()

    assert os.path.dirname(path) == os.path.dirname(settings.__file__)
    assert os.path.exists(path)


def test_shipped_file_matches_defaults(monkeypatch):
    monkeypatch.delenv(settings.SETTINGS_ENV, raising=False)
    settings.load_settings.cache_clear()
    try:
        assert settings.load_settings() == settings.DEFAULT_SETTINGS
    finally:
        settings.load_settings.cache_clear()
