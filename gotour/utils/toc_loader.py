"""
Table of contents loader for the Go tour.

Loads the ordered module list from a YAML file in gotour/data/.
"""

from pathlib import Path
from typing import Any

import yaml

from gotour.schemas import Module


# Default table of contents (shipped with the package)
TOC_PATH = Path(__file__).parent.parent / "data" / "table_of_contents.yaml"


def load_raw_table_of_contents(path: Path | None = None) -> list[dict[str, Any]]:
    """
    Load the table of contents without validation.

    Args:
        path: Optional custom YAML file

    Returns:
        List of dicts with keys:
        - title: module title
        - description: optional module description
        - lessons: ordered lesson names

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    file_path = path or TOC_PATH

    if not file_path.exists():
        raise FileNotFoundError(f"Table of contents not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or []


def load_table_of_contents(path: Path | None = None) -> list[Module]:
    """Load and validate the table of contents."""
    return [Module.model_validate(entry) for entry in load_raw_table_of_contents(path)]


def get_lesson_names(modules: list[Module]) -> list[str]:
    """Flatten the table of contents into lesson names, in reading order."""
    return [name for module in modules for name in module.lessons]
