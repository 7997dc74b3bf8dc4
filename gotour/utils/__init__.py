"""Go tour utilities."""

from .toc_loader import load_table_of_contents, load_raw_table_of_contents, get_lesson_names

__all__ = [
    "load_table_of_contents",
    "load_raw_table_of_contents",
    "get_lesson_names",
]
