"""Tests for station list parsing and loading."""

import pytest

from radio_player.domain.stations import (
    Divider,
    Playable,
    StationConfig,
    StationConfigError,
    create_default_stations,
    is_selectable,
    load_station_config,
    parse_station_config,
)


class TestParseStationConfig:
    def test_parses_title_and_stations(self):
        config = parse_station_config(
            {
                "title": "Jazz",
                "station": [
                    {"title": "One", "url": "http://one"},
                    {"title": "", "url": ""},
                    {"title": "Two", "url": " http://two "},
                ],
            }
        )
        assert config.title == "Jazz"
        assert config.stations == (
            Playable("One", "http://one"),
            Divider(),
            Playable("Two", "http://two"),
        )

    def test_accepts_stations_key(self):
        config = parse_station_config(
            {"title": "T", "stations": [{"title": "One", "url": "http://one"}]}
        )
        assert config.stations == (Playable("One", "http://one"),)

    def test_missing_station_array_is_empty(self):
        config = parse_station_config({"title": "Empty"})
        assert config.stations == ()

    def test_divider_may_omit_url(self):
        config = parse_station_config({"station": [{"title": ""}]})
        assert config.stations == (Divider(),)

    def test_playable_with_empty_url_kept(self):
        config = parse_station_config({"station": [{"title": "Off air", "url": ""}]})
        assert config.stations == (Playable("Off air", ""),)

    def test_missing_url_raises(self):
        with pytest.raises(StationConfigError):
            parse_station_config({"station": [{"title": "No URL"}]})

    def test_non_table_entry_raises(self):
        with pytest.raises(StationConfigError):
            parse_station_config({"station": ["http://one"]})


class TestLoadStationConfig:
    def test_missing_file_returns_none(self, tmp_path):
        assert load_station_config(tmp_path / "radio.toml") is None

    def test_undecodable_file_returns_none(self, tmp_path):
        path = tmp_path / "radio.toml"
        path.write_text("title = [unterminated", encoding="utf-8")
        assert load_station_config(path) is None

    def test_invalid_utf8_returns_none(self, tmp_path):
        path = tmp_path / "radio.toml"
        path.write_bytes(b'title = "\xff\xfe"\n')
        assert load_station_config(path) is None

    def test_invalid_shape_returns_none(self, tmp_path):
        path = tmp_path / "radio.toml"
        path.write_text('[[station]]\ntitle = "No URL"\n', encoding="utf-8")
        assert load_station_config(path) is None

    def test_default_station_file_loads(self, tmp_path):
        path = tmp_path / "radio.toml"
        path.write_text(create_default_stations(), encoding="utf-8")

        config = load_station_config(path)

        assert config is not None
        assert config.title == "Radio"
        assert any(isinstance(s, Divider) for s in config.stations)
        assert sum(is_selectable(s) for s in config.stations) == 3


class TestStationConfigUpdate:
    def test_update_keeps_identity(self):
        config = StationConfig("Old", (Playable("A", "a"),))
        same = config

        config.update(StationConfig("New", (Playable("B", "b"), Divider())))

        assert same is config
        assert config.title == "New"
        assert config.stations == (Playable("B", "b"), Divider())


def test_is_selectable():
    assert is_selectable(Playable("A", "a"))
    assert is_selectable(Playable("A", ""))
    assert not is_selectable(Divider())
    assert not is_selectable(Playable("", "a"))
