"""Tests for the spacetime CLI config bridge"""
import pytest
import tomlkit

from spacetime_token.core.config import AppSettings
from spacetime_token.core.exceptions import (
    BridgeError,
    CliConfigNotFoundError,
    CliConfigParseError,
    TokenTypeError,
)
from spacetime_token.external.cli_config import ExternalCliConfig, get_active_token, set_active_token

KEY = "spacetimedb_token"

SAMPLE_DOC = """\
# spacetime CLI settings
default_server = "local"

spacetimedb_token = "old-token"  # managed by login

[[server_configs]]
nickname = "local"
host = "127.0.0.1:3000"
"""


class TestTokenAccessors:
    """Test get_active_token / set_active_token on documents"""

    def test_absent_key_is_none(self):
        assert get_active_token(tomlkit.parse('default_server = "local"\n'), KEY) is None

    def test_string_value_is_returned(self):
        assert get_active_token(tomlkit.parse(f'{KEY} = "abc"\n'), KEY) == "abc"

    def test_non_string_value_raises(self):
        with pytest.raises(TokenTypeError) as exc_info:
            get_active_token(tomlkit.parse(f"{KEY} = 123\n"), KEY)
        assert exc_info.value.key == KEY
        assert "int" in str(exc_info.value)
        assert "Integer" not in str(exc_info.value)

    @pytest.mark.parametrize(
        "raw, type_name", [("true", "bool"), ("{ a = \"b\" }", "dict"), ("[\"x\"]", "list")]
    )
    def test_non_string_value_names_python_type(self, raw, type_name):
        with pytest.raises(TokenTypeError) as exc_info:
            get_active_token(tomlkit.parse(f"{KEY} = {raw}\n"), KEY)
        assert f"found {type_name}" in str(exc_info.value)

    def test_set_then_get(self):
        doc = tomlkit.document()
        set_active_token(doc, KEY, "new")
        assert get_active_token(doc, KEY) == "new"

    def test_set_overwrites_non_string(self):
        doc = tomlkit.parse(f"{KEY} = 123\n")
        set_active_token(doc, KEY, "new")
        assert get_active_token(doc, KEY) == "new"


class TestExternalCliConfig:
    """Test reading and writing the document on disk"""

    def test_from_settings_builds_path_under_home(self, tmp_path):
        settings = AppSettings(cli_config_dir_from_home="cfg/st", cli_config_filename="x.toml", cli_token_key="tok")
        config = ExternalCliConfig.from_settings(settings, home=tmp_path)
        assert config.path == tmp_path / "cfg" / "st" / "x.toml"
        assert config.token_key == "tok"
        assert config.filename == "x.toml"

    def test_read_missing_raises_not_found(self, tmp_path):
        config = ExternalCliConfig(tmp_path / "cli.toml", KEY)
        with pytest.raises(CliConfigNotFoundError):
            config.read()

    def test_read_invalid_raises_parse_error(self, tmp_path):
        path = tmp_path / "cli.toml"
        path.write_text("[unterminated\n")
        with pytest.raises(CliConfigParseError) as exc_info:
            ExternalCliConfig(path, KEY).read()
        assert isinstance(exc_info.value, BridgeError)

    def test_read_or_new_starts_empty_document(self, tmp_path):
        doc = ExternalCliConfig(tmp_path / "cli.toml", KEY).read_or_new()
        assert len(doc) == 0

    def test_write_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "cli.toml"
        config = ExternalCliConfig(path, KEY)
        doc = config.read_or_new()
        config.set_token(doc, "tok")
        config.write(doc)

        assert path.exists()
        assert config.get_token(config.read()) == "tok"

    def test_write_preserves_comments_and_other_keys(self, tmp_path):
        path = tmp_path / "cli.toml"
        path.write_text(SAMPLE_DOC)
        config = ExternalCliConfig(path, KEY)

        doc = config.read()
        config.set_token(doc, "new-token")
        config.write(doc)

        content = path.read_text()
        assert 'spacetimedb_token = "new-token"' in content
        assert "old-token" not in content
        assert 'default_server = "local"' in content
        assert "# spacetime CLI settings" in content
        assert 'host = "127.0.0.1:3000"' in content

    def test_active_token_is_best_effort(self, tmp_path):
        path = tmp_path / "cli.toml"
        config = ExternalCliConfig(path, KEY)
        assert config.active_token() is None

        path.write_text("not = = toml")
        assert config.active_token() is None

        path.write_text(f"{KEY} = 5\n")
        assert config.active_token() is None

        path.write_text(f'{KEY} = "tok"\n')
        assert config.active_token() == "tok"
