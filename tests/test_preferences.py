import json

from crunchem.preferences import DARK_MODE_KEY, FAVORITES_KEY, SIDEBAR_KEY, PreferenceStore


def test_missing_file_gives_defaults(tmp_path):
    store = PreferenceStore.load(tmp_path / "prefs.json")
    assert store.favorites() == []
    assert store.state.dark_mode is False
    assert store.state.sidebar_collapsed is False
    assert store.selected_category == "All"


def test_toggle_favorite_persists(tmp_path):
    path = tmp_path / "prefs.json"
    store = PreferenceStore.load(path)
    assert store.toggle_favorite("tip-calculator") is True
    assert store.is_favorite("tip-calculator")
    saved = json.loads(path.read_text())
    assert saved[FAVORITES_KEY] == ["tip-calculator"]

    again = PreferenceStore.load(path)
    assert again.favorites() == ["tip-calculator"]
    assert again.toggle_favorite("tip-calculator") is False
    assert PreferenceStore.load(path).favorites() == []


def test_favorites_keep_insertion_order(tmp_path):
    store = PreferenceStore.load(tmp_path / "prefs.json")
    for cid in ("b", "a", "c"):
        store.toggle_favorite(cid)
    store.toggle_favorite("a")
    assert store.favorites() == ["b", "c"]


def test_flags_persist_under_storage_keys(tmp_path):
    path = tmp_path / "prefs.json"
    store = PreferenceStore.load(path)
    assert store.toggle_dark_mode() is True
    assert store.toggle_sidebar() is True
    saved = json.loads(path.read_text())
    assert saved[DARK_MODE_KEY] is True
    assert saved[SIDEBAR_KEY] is True
    store.set_dark_mode(False)
    assert PreferenceStore.load(path).state.dark_mode is False


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("{not json")
    assert PreferenceStore.load(path).favorites() == []
    path.write_text(json.dumps({FAVORITES_KEY: "not-a-list"}))
    assert PreferenceStore.load(path).favorites() == []


def test_selected_category_is_not_persisted(tmp_path):
    path = tmp_path / "prefs.json"
    store = PreferenceStore.load(path)
    store.selected_category = "Cooking"
    store.set_dark_mode(True)
    assert "Cooking" not in path.read_text()
    assert PreferenceStore.load(path).selected_category == "All"
