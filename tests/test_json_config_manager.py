import json

import pytest

from flowcanvas.utils.shared.json_config_manager import (
    CanvasPreferences,
    JSONConfigManager,
    create_preferences_manager,
)


def test_register_save_load(tmp_path):
    cfg_dir = tmp_path / "cfg"
    mgr = JSONConfigManager(app_name="testapp", config_dir=str(cfg_dir))

    prefs = CanvasPreferences()
    mgr.register_category(prefs)
    prefs.set_line_type("bezier")
    prefs.set_grid(20, 10)
    prefs.toggle_minimap()

    assert mgr.save()

    cfg_file = cfg_dir / "config.json"
    assert cfg_file.exists()
    data = json.loads(cfg_file.read_text(encoding="utf-8"))
    assert data["_metadata"]["app_name"] == "testapp"
    assert "history" not in data and "selection" not in data

    mgr2 = JSONConfigManager(app_name="testapp", config_dir=str(cfg_dir))
    mgr2.register_category(CanvasPreferences())
    assert mgr2.load()

    canvas = mgr2.get_category("canvas")
    assert canvas.get("line_type") == "bezier"
    assert canvas.get("grid") == [20.0, 10.0]
    assert canvas.get("show_minimap") is False


def test_save_keeps_backup(tmp_path):
    mgr = JSONConfigManager(config_dir=tmp_path)
    prefs = CanvasPreferences()
    mgr.register_category(prefs)
    assert mgr.save()
    prefs.set_theme("dark")
    assert mgr.save()

    backup = json.loads((tmp_path / "config.json.bak").read_text(encoding="utf-8"))
    assert backup["canvas"]["theme"] == "light"


def test_restore_from_backup(tmp_path):
    mgr = JSONConfigManager(config_dir=tmp_path)
    prefs = CanvasPreferences()
    mgr.register_category(prefs)
    mgr.save()
    prefs.set_theme("dark")
    mgr.save()

    assert mgr.restore_from_backup()
    assert prefs.get("theme") == "light"


def test_restore_without_backup(tmp_path):
    mgr = JSONConfigManager(config_dir=tmp_path)
    assert not mgr.restore_from_backup()


def test_get_category_create(tmp_path):
    mgr = JSONConfigManager(app_name="testx", config_dir=str(tmp_path))
    cat = mgr.get_category("dialogs", create_if_not_exists=True)
    assert cat is not None
    assert cat.name == "dialogs"
    assert mgr.list_categories() == ["dialogs"]


def test_load_without_file_uses_defaults(tmp_path):
    mgr = create_preferences_manager(tmp_path)
    assert mgr.get_category("canvas").get("snap") is True


def test_load_corrupt_file(tmp_path):
    (tmp_path / "config.json").write_text("{broken", encoding="utf-8")
    mgr = JSONConfigManager(config_dir=tmp_path)
    mgr.register_category(CanvasPreferences())
    assert not mgr.load()


def test_stored_invalid_values_fall_back(tmp_path):
    (tmp_path / "config.json").write_text(
        json.dumps({"canvas": {"line_type": "zigzag", "theme": "dark", "grid": "big"}}),
        encoding="utf-8",
    )
    mgr = create_preferences_manager(tmp_path)
    canvas = mgr.get_category("canvas")
    assert canvas.get("line_type") == "smoothstep"
    assert canvas.get("grid") == [16, 16]
    assert canvas.get("theme") == "dark"


def test_debug_reset_deletes_file(tmp_path, monkeypatch):
    import flowcanvas.config

    (tmp_path / "config.json").write_text(json.dumps({"canvas": {"theme": "dark"}}), encoding="utf-8")
    monkeypatch.setattr(flowcanvas.config, "DEBUG_RESET_CONFIG", True)
    mgr = create_preferences_manager(tmp_path)
    assert not (tmp_path / "config.json").exists()
    assert mgr.get_category("canvas").get("theme") == "light"


class TestCanvasPreferences:
    """Validation and toggles."""

    def setup_method(self):
        self.prefs = CanvasPreferences()

    def test_defaults(self):
        assert self.prefs.to_dict() == {
            "snap": True,
            "grid": [16, 16],
            "line_type": "smoothstep",
            "show_minimap": True,
            "show_controls": True,
            "show_inspector": True,
            "theme": "light",
        }

    def test_toggles(self):
        assert self.prefs.toggle_snap() is False
        assert self.prefs.toggle_controls() is False
        assert self.prefs.toggle_inspector() is False
        assert self.prefs.toggle_theme() == "dark"
        assert self.prefs.toggle_theme() == "light"

    @pytest.mark.parametrize(
        ("key", "value"),
        [("line_type", "zigzag"), ("theme", "blue"), ("grid", [0, 16]), ("grid", "wide")],
    )
    def test_invalid_values_rejected(self, key, value):
        with pytest.raises(ValueError):
            self.prefs.set(key, value)

    def test_reset(self):
        self.prefs.set_line_type("straight")
        self.prefs.reset()
        assert self.prefs.get("line_type") == "smoothstep"

    def test_defaults_not_shared(self):
        other = CanvasPreferences()
        self.prefs.set_grid(8, 8)
        assert other.get("grid") == [16, 16]
