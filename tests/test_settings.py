"""Tests for reading and writing config.toml."""

import pytest

from vsm.config import VariantCatalog, VariantPreference
from vsm.errors import SettingsReadError, SettingsWriteError
from vsm.settings import SettingsStore


@pytest.fixture
def settings(tmp_path):
    config_dir = tmp_path / "config" / "vsm"
    return SettingsStore(config_dir, config_dir / "config.toml")


class TestSettingsStore:
    def test_missing_file_does_not_exist(self, settings):
        assert settings.exists() is False

    def test_directory_is_not_a_settings_file(self, settings):
        settings.config_file.mkdir(parents=True)
        assert settings.exists() is False

    @pytest.mark.parametrize("name", ["vim", "nvim", "gvim", "neovide"])
    def test_save_then_load(self, settings, name):
        pref = VariantPreference.from_catalog(VariantCatalog(), name)
        settings.save(pref)
        assert settings.exists()
        assert settings.load() == pref

    def test_save_creates_parent_directories(self, settings):
        settings.save(VariantPreference("vim", "-S"))
        assert settings.config_dir.is_dir()

    def test_file_layout(self, settings):
        settings.save(VariantPreference("neovide", "-- -S"))
        text = settings.config_file.read_text()
        assert "[vim_variant]" in text
        assert 'active_variant = "neovide"' in text
        assert 'shell_command = "-- -S"' in text

    def test_save_overwrites(self, settings):
        settings.save(VariantPreference("vim", "-S"))
        settings.save(VariantPreference("gvim", "-S"))
        assert settings.load().active_variant == "gvim"

    def test_load_malformed_toml(self, settings):
        settings.config_dir.mkdir(parents=True)
        settings.config_file.write_text("[vim_variant\nactive_variant = ")
        with pytest.raises(SettingsReadError) as exc:
            settings.load()
        assert str(exc.value).startswith("Toml Read Error: ")

    def test_load_missing_field(self, settings):
        settings.config_dir.mkdir(parents=True)
        settings.config_file.write_text('[vim_variant]\nactive_variant = "vim"\n')
        with pytest.raises(SettingsReadError, match="shell_command"):
            settings.load()

    def test_load_missing_table(self, settings):
        settings.config_dir.mkdir(parents=True)
        settings.config_file.write_text('active_variant = "vim"\n')
        with pytest.raises(SettingsReadError, match="vim_variant"):
            settings.load()

    def test_load_invalid_utf8(self, settings):
        settings.config_dir.mkdir(parents=True)
        settings.config_file.write_bytes(b'[vim_variant]\nactive_variant = "\xff\xfe"\n')
        with pytest.raises(SettingsReadError) as exc:
            settings.load()
        assert "utf-8" in str(exc.value)

    def test_load_unreadable(self, settings):
        with pytest.raises(SettingsReadError):
            settings.load()

    def test_save_failure_includes_cause(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = SettingsStore(blocker / "vsm", blocker / "vsm" / "config.toml")
        with pytest.raises(SettingsWriteError) as exc:
            store.save(VariantPreference("vim", "-S"))
        assert str(exc.value).startswith("Toml Write Error: ")
        assert exc.value.msg
