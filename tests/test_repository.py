"""Tests for dotconf.config.repository."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dotconf.config import ConfigRepository
from dotconf.config.repository import to_float, to_int, to_str
from dotconf.logger import Logger


@pytest.fixture
def config() -> ConfigRepository:
    return ConfigRepository(logger=MagicMock(spec=Logger))


class TestAccess:
    """get / set / has / all"""

    def test_set_and_get(self, config):
        config.set("app.name", "TestApp")
        assert config.get("app.name") == "TestApp"

    def test_get_returns_default_for_missing_key(self, config):
        assert config.get("missing.key", "default") == "default"
        assert config.get("missing.key") is None

    def test_nested_dot_notation(self, config):
        config.set("database.connections.mysql.host", "localhost")
        assert config.get("database.connections.mysql.host") == "localhost"

    def test_set_then_get_parent_returns_mapping(self, config):
        config.set("a.b.c", 1)
        assert config.get("a.b.c") == 1
        assert config.get("a.b") == {"c": 1}

    def test_has(self, config):
        config.set("app.name", "TestApp")
        config.set("app.secret", None)
        assert config.has("app.name")
        assert config.has("app.secret")
        assert not config.has("missing.key")

    def test_all_returns_all_config(self, config):
        config.set("a", 1)
        config.set("b", 2)
        all_items = config.all()
        assert "a" in all_items
        assert "b" in all_items

    def test_all_is_a_copy(self, config):
        config.set("a.b", 1)
        snapshot = config.all()
        snapshot["a"]["b"] = 99
        assert config.get("a.b") == 1

    def test_initial_items_are_copied(self):
        items = {"app": {"debug": True}}
        config = ConfigRepository(items, logger=MagicMock(spec=Logger))
        items["app"]["debug"] = False
        assert config.get("app.debug") is True

    def test_dunder_helpers(self, config):
        config.set("app.name", "x")
        assert "app.name" in config
        assert "app.port" not in config
        assert config["app.name"] == "x"
        assert len(config) == 1
        with pytest.raises(KeyError):
            config["app.port"]


class TestTypedAccessors:
    def test_string_returns_string(self, config):
        config.set("app.name", "TestApp")
        assert config.string("app.name") == "TestApp"

    def test_string_casts_scalars(self, config):
        config.set("port", 8080)
        config.set("flag", True)
        config.set("off", False)
        config.set("whole", 8080.0)
        config.set("ratio", 0.5)
        config.set("nothing", None)
        assert config.string("port") == "8080"
        assert config.string("flag") == "1"
        assert config.string("off") == ""
        assert config.string("whole") == "8080"
        assert config.string("ratio") == "0.5"
        assert config.string("nothing") == ""
        assert config.string("missing", "dflt") == "dflt"

    def test_int_returns_integer(self, config):
        config.set("app.port", 8080)
        assert config.int("app.port") == 8080

    def test_int_lenient_string_cast(self, config):
        config.set("a", "12abc")
        config.set("b", "abc")
        config.set("c", " 42 ")
        config.set("d", "3.9")
        assert config.int("a") == 12
        assert config.int("b") == 0
        assert config.int("c") == 42
        assert config.int("d") == 3
        assert config.int("missing", 7) == 7

    def test_float_returns_float(self, config):
        config.set("ratio", "0.75")
        config.set("weight", "3.9kg")
        assert config.float("ratio") == 0.75
        assert config.float("weight") == 3.9
        assert config.float("missing", 1.5) == 1.5

    def test_bool_returns_bool(self, config):
        config.set("app.debug", True)
        assert config.bool("app.debug") is True

    @pytest.mark.parametrize("raw", ["true", "TRUE", "1", "yes", "On"])
    def test_bool_truthy_strings(self, config, raw):
        config.set("flag", raw)
        assert config.bool("flag") is True

    @pytest.mark.parametrize("raw", ["maybe", "false", "0", "", "off"])
    def test_bool_other_strings_are_false(self, config, raw):
        config.set("flag", raw)
        assert config.bool("flag") is False

    def test_bool_other_types_use_truthiness(self, config):
        config.set("zero", 0)
        config.set("items", [1])
        assert config.bool("zero") is False
        assert config.bool("items") is True
        assert config.bool("missing", True) is True

    def test_array_returns_array(self, config):
        config.set("app.drivers", ["file", "redis"])
        assert config.array("app.drivers") == ["file", "redis"]

    def test_array_returns_mapping(self, config):
        config.set("app.db", {"host": "h"})
        config.set("app.name", "x")
        assert config.array("app") == {"db": {"host": "h"}, "name": "x"}

    def test_array_does_not_wrap_scalars(self, config):
        config.set("k", "scalar")
        assert config.array("k", []) == []
        assert config.array("k") == []
        assert config.array("k", ["fallback"]) == ["fallback"]


class TestCasts:
    def test_to_int_edge_cases(self):
        assert to_int(None) == 0
        assert to_int(True) == 1
        assert to_int(-3.7) == -3
        assert to_int(float("inf")) == 0
        assert to_int("1e3") == 1000
        assert to_int("+5") == 5
        assert to_int("-5x") == -5
        assert to_int({}) == 0
        assert to_int({"a": 1}) == 1
        assert to_int(object(), 9) == 9

    def test_to_float_edge_cases(self):
        assert to_float(None) == 0.0
        assert to_float(".5") == 0.5
        assert to_float("") == 0.0
        assert to_float([]) == 0.0

    def test_to_str_containers_are_json(self):
        assert to_str({"a": [1, 2]}) == '{"a":[1,2]}'


class TestMerge:
    def test_merge_is_recursive_for_mappings(self, config):
        config.set("a.y", 2)
        config.merge({"a": {"x": 1}})
        assert config.get("a") == {"x": 1, "y": 2}

    def test_merge_scalar_replaces_mapping(self, config):
        config.set("a.y", 2)
        config.merge({"a": "flat"})
        assert config.get("a") == "flat"

    def test_merge_adds_new_keys(self, config):
        config.merge({"cache": {"driver": "file"}})
        assert config.string("cache.driver") == "file"


class TestLoadDirectory:
    def _write(self, directory: Path, name: str, content) -> None:
        text = content if isinstance(content, str) else json.dumps(content)
        (directory / name).write_text(text, encoding="utf-8")

    def test_missing_directory_is_noop(self, config, tmp_path: Path):
        config.set("keep", 1)
        config.load_directory(tmp_path / "does-not-exist")
        assert config.all() == {"keep": 1}

    def test_file_is_not_a_directory(self, config, tmp_path: Path):
        target = tmp_path / "app.json"
        target.write_text("{}")
        config.load_directory(target)
        assert config.all() == {}

    def test_filename_becomes_top_level_key(self, config, tmp_path: Path):
        self._write(tmp_path, "app.json", {"name": "Demo", "debug": True})
        self._write(tmp_path, "database.json", {"connections": {"mysql": {"port": 3306}}})

        config.load_directory(tmp_path)

        assert config.get("app.name") == "Demo"
        assert config.int("database.connections.mysql.port") == 3306

    def test_loaded_file_replaces_existing_key(self, config, tmp_path: Path):
        config.set("app.legacy", True)
        self._write(tmp_path, "app.json", {"name": "Demo"})

        config.load_directory(tmp_path)

        assert config.get("app") == {"name": "Demo"}
        assert not config.has("app.legacy")

    def test_list_documents_are_kept(self, config, tmp_path: Path):
        self._write(tmp_path, "hosts.json", ["a", "b"])
        config.load_directory(tmp_path)
        assert config.array("hosts") == ["a", "b"]

    def test_non_container_documents_are_discarded(self, config, tmp_path: Path):
        self._write(tmp_path, "scalar.json", 42)
        self._write(tmp_path, "text.json", "hello")
        config.load_directory(tmp_path)
        assert not config.has("scalar")
        assert not config.has("text")

    def test_malformed_file_is_skipped_with_warning(self, config, tmp_path: Path):
        self._write(tmp_path, "broken.json", "{not json")
        self._write(tmp_path, "good.json", {"ok": True})

        config.load_directory(tmp_path)

        assert not config.has("broken")
        assert config.bool("good.ok") is True
        config.logger.warning.assert_called_once()

    def test_other_extensions_and_subdirectories_ignored(self, config, tmp_path: Path):
        self._write(tmp_path, "notes.txt", {"a": 1})
        nested = tmp_path / "nested"
        nested.mkdir()
        self._write(nested, "deep.json", {"a": 1})

        config.load_directory(tmp_path)

        assert config.all() == {}

    def test_accepts_string_path(self, config, tmp_path: Path):
        self._write(tmp_path, "app.json", {"name": "Demo"})
        config.load_directory(str(tmp_path))
        assert config.string("app.name") == "Demo"
