"""Tests for the SQLite-backed station selection."""

from radio_player.domain.playback import SQLiteSelectionStore


def test_defaults_to_no_selection(tmp_path):
    store = SQLiteSelectionStore(tmp_path / "radio.db")
    assert store.load() == -1


def test_save_survives_new_store(tmp_path):
    db_path = tmp_path / "radio.db"
    SQLiteSelectionStore(db_path).save(4)

    assert SQLiteSelectionStore(db_path).load() == 4


def test_save_overwrites(tmp_path):
    store = SQLiteSelectionStore(tmp_path / "radio.db")
    store.save(2)
    store.save(-1)
    assert store.load() == -1


def test_default_location_uses_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    SQLiteSelectionStore().save(1)

    assert (tmp_path / "radio-player" / "radio_player.db").exists()
    assert SQLiteSelectionStore().load() == 1


def test_corrupt_database_falls_back_to_no_selection(tmp_path):
    db_path = tmp_path / "radio.db"
    db_path.write_bytes(b"this is not an sqlite database" * 10)

    store = SQLiteSelectionStore(db_path)

    assert store.load() == -1
    store.save(3)  # logged, not raised
