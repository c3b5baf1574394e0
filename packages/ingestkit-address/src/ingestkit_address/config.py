"""Configuration model for ingestkit-address.

Provides ``AddressConfig`` with the decoding and rendering knobs and
sensible defaults.  Supports loading overrides from YAML or JSON files via
the ``from_file()`` classmethod.
"""

from __future__ import annotations

import json
import pathlib

from pydantic import BaseModel, model_validator

# Charset labels seen in real mail that Python's codec registry does not know.
DEFAULT_CHARSET_ALIASES: dict[str, str] = {
    "ks_c_5601-1987": "cp949",
    "x-sjis": "shift_jis",
    "x-gbk": "gbk",
    "windows-874": "cp874",
    "unicode-1-1-utf-7": "utf-7",
}


class AddressConfig(BaseModel):
    """All tunable parameters with sensible defaults."""

    # --- Decoding ---
    charset_aliases: dict[str, str] = dict(DEFAULT_CHARSET_ALIASES)

    # --- Rendering ---
    describe_decoded_name: bool = False

    # --- Logging ---
    log_decode_failures: bool = True

    @model_validator(mode="after")
    def _normalise_charset_aliases(self) -> AddressConfig:
        self.charset_aliases = {
            label.strip().lower(): codec for label, codec in self.charset_aliases.items()
        }
        return self

    def resolve_charset(self, charset: str) -> str:
        """Map a declared charset label to a Python codec name."""
        label = charset.strip().lower()
        return self.charset_aliases.get(label, label)

    @classmethod
    def from_file(cls, path: str) -> AddressConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Keys present in the file override the
        corresponding defaults; keys not present retain their defaults.
        A ``charset_aliases`` mapping replaces the built-in aliases as a
        whole, and its labels are lowercased and stripped on load.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            try:
                import yaml  # type: ignore[import-untyped]
            except ImportError as exc:
                raise ImportError(
                    "pyyaml is required to load YAML config files. "
                    "Install it with: pip install pyyaml"
                ) from exc
            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}

        return cls(**data)
