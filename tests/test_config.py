"""Tests for config.py — env parsing and constants."""

from markdown_table import config


class TestEnvBool:
    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("MARKDOWN_TABLE_TEST_FLAG", raising=False)
        assert config._env_bool("MARKDOWN_TABLE_TEST_FLAG") is False
        assert config._env_bool("MARKDOWN_TABLE_TEST_FLAG", True) is True

    def test_truthy_values(self, monkeypatch):
        for raw in ("1", "true", "YES", " on "):
            monkeypatch.setenv("MARKDOWN_TABLE_TEST_FLAG", raw)
            assert config._env_bool("MARKDOWN_TABLE_TEST_FLAG") is True

    def test_falsy_values(self, monkeypatch):
        for raw in ("0", "false", "no", "off", ""):
            monkeypatch.setenv("MARKDOWN_TABLE_TEST_FLAG", raw)
            assert config._env_bool("MARKDOWN_TABLE_TEST_FLAG", True) is False


class TestConstants:
    def test_version_string(self):
        assert isinstance(config.VERSION, str)
        assert config.VERSION.count(".") == 2

    def test_markup_pieces(self):
        assert config.CELL_OPEN == "| "
        assert config.CELL_CLOSE == " "
        assert config.LINE_CLOSE == "|"
        assert config.SEPARATOR_CHAR == "-"

    def test_init_re_exports_version(self):
        from markdown_table import VERSION

        assert VERSION == config.VERSION
