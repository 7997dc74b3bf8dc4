"""
Translator - UI string lookup.

Translation catalogs are YAML mappings of key to text, one file per
language under gotour/data/translations/ (e.g. eng.yaml).
"""

from pathlib import Path
from typing import Optional

import yaml


TRANSLATIONS_DIR = Path(__file__).parent.parent / "data" / "translations"


def load_translations(lang: str, translations_dir: Path | None = None) -> dict[str, str]:
    """
    Load the translation mapping for a language.

    Args:
        lang: Language code without .yaml extension (e.g., "eng")
        translations_dir: Optional custom translations directory

    Returns:
        Dict of translation key to text

    Raises:
        FileNotFoundError: If no catalog exists for the language
        yaml.YAMLError: If YAML parsing fails
    """
    dir_path = translations_dir or TRANSLATIONS_DIR
    file_path = dir_path / f"{lang}.yaml"

    if not file_path.exists():
        raise FileNotFoundError(f"Translation catalog not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return {str(k): str(v) for k, v in data.items()}


class Translator:
    """Look up strings in a preloaded mapping."""

    def __init__(self, translation: Optional[dict[str, str]] = None):
        self.translation = translation or {}

    @classmethod
    def for_language(cls, lang: str, translations_dir: Path | None = None) -> "Translator":
        return cls(load_translations(lang, translations_dir))

    def l(self, key: str) -> str:  # noqa: E743
        """Get the text for key, or a visible placeholder if it is missing."""
        text = self.translation.get(key)
        if text:
            return text
        return f"(no translation for {key})"
