"""Tests for ingestkit_address.config."""

from __future__ import annotations

import json

import pytest

from ingestkit_address.config import DEFAULT_CHARSET_ALIASES, AddressConfig


class TestAddressConfig:
    def test_defaults(self):
        """All defaults are in place."""
        cfg = AddressConfig()
        assert cfg.charset_aliases == DEFAULT_CHARSET_ALIASES
        assert cfg.describe_decoded_name is False
        assert cfg.log_decode_failures is True

    def test_defaults_not_shared(self):
        """Mutating one instance's aliases leaves others untouched."""
        cfg = AddressConfig()
        cfg.charset_aliases["x-custom"] = "utf-8"
        assert "x-custom" not in AddressConfig().charset_aliases

    def test_resolve_charset_alias(self):
        """Known aliases map to Python codec names, case-insensitively."""
        cfg = AddressConfig()
        assert cfg.resolve_charset("KS_C_5601-1987") == "cp949"

    def test_resolve_charset_passthrough(self):
        """Unaliased labels are lowercased and returned."""
        cfg = AddressConfig()
        assert cfg.resolve_charset("UTF-8") == "utf-8"

    def test_alias_keys_normalised(self):
        """Alias keys supplied in mixed case still match."""
        cfg = AddressConfig(charset_aliases={"X-Mac-Roman ": "mac_roman"})
        assert cfg.resolve_charset("x-mac-roman") == "mac_roman"

    def test_from_file_json(self, tmp_path):
        """JSON override loads correctly."""
        data = {"describe_decoded_name": True, "log_decode_failures": False}
        p = tmp_path / "config.json"
        p.write_text(json.dumps(data))

        cfg = AddressConfig.from_file(str(p))
        assert cfg.describe_decoded_name is True
        assert cfg.log_decode_failures is False
        # Defaults preserved
        assert cfg.charset_aliases == DEFAULT_CHARSET_ALIASES

    def test_from_file_yaml(self, tmp_path):
        """YAML override loads correctly."""
        yaml_content = "describe_decoded_name: true\ncharset_aliases:\n  x-weird: latin-1\n"
        p = tmp_path / "config.yaml"
        p.write_text(yaml_content)

        cfg = AddressConfig.from_file(str(p))
        assert cfg.describe_decoded_name is True
        assert cfg.charset_aliases == {"x-weird": "latin-1"}

    def test_from_file_aliases_normalised(self, tmp_path):
        """Alias labels from a file are lowercased and replace the defaults."""
        p = tmp_path / "config.json"
        p.write_text(json.dumps({"charset_aliases": {" X-Weird ": "latin-1"}}))

        cfg = AddressConfig.from_file(str(p))
        assert cfg.charset_aliases == {"x-weird": "latin-1"}
        assert cfg.resolve_charset("X-WEIRD") == "latin-1"

    def test_from_file_empty_yaml(self, tmp_path):
        """Empty YAML file yields defaults."""
        p = tmp_path / "config.yml"
        p.write_text("")

        cfg = AddressConfig.from_file(str(p))
        assert cfg == AddressConfig()

    def test_from_file_not_found(self):
        """Raises FileNotFoundError for missing file."""
        with pytest.raises(FileNotFoundError):
            AddressConfig.from_file("/nonexistent/config.json")

    def test_from_file_bad_extension(self, tmp_path):
        """Unknown extension raises ValueError."""
        p = tmp_path / "config.toml"
        p.write_text("describe_decoded_name = true\n")
        with pytest.raises(ValueError, match="Unsupported config file extension"):
            AddressConfig.from_file(str(p))
