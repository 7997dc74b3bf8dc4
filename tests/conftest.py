"""Shared fixtures for the tour client tests."""

from unittest.mock import MagicMock

import pytest

from gotour.schemas import Module


def lesson_json(title: str, files: list[tuple[str, str]]) -> dict:
    """Lesson as delivered by the content service."""
    return {
        "Title": title,
        "Description": f"About {title}",
        "Pages": [
            {
                "Title": f"{title} page",
                "Content": "<p>text</p>",
                "Files": [
                    {"Name": "prog.go", "Content": content, "Hash": file_hash}
                    for file_hash, content in files
                ],
            }
        ],
    }


@pytest.fixture
def table_of_contents() -> list[Module]:
    return [
        Module(title="Using the tour", lessons=["welcome"]),
        Module(title="Basics", lessons=["basics", "flowcontrol", "moretypes"]),
        Module(title="Methods", lessons=["methods"]),
    ]


@pytest.fixture
def lesson_table() -> dict:
    return {
        "welcome": lesson_json("Welcome", [("h-welcome", "package main // hello")]),
        "basics": lesson_json("Basics", [("h-basics-1", "package main // one"),
                                         ("h-basics-2", "package main // two")]),
        "flowcontrol": lesson_json("Flow control", [("h-flow", "package main // for")]),
        "moretypes": lesson_json("More types", [("h-more", "package main // structs")]),
        "methods": lesson_json("Methods", [("h-methods", "package main // methods")]),
    }


@pytest.fixture
def lesson_session(lesson_table):
    """requests.Session whose GET returns the lesson table."""
    session = MagicMock()
    response = MagicMock()
    response.json.return_value = lesson_table
    response.raise_for_status.return_value = None
    session.get.return_value = response
    return session


class FakeSurface:
    """Editor surface recording what was done to it."""

    def __init__(self, mode: str = "text/x-go-comment"):
        self.mode = mode
        self.set_modes: list[str] = []
        self.refreshes = 0
        self.marks: dict[int, str] = {}
        self.mark_calls: list[tuple[int, str]] = []

    def get_mode(self) -> str:
        return self.mode

    def set_mode(self, mode: str):
        self.mode = mode
        self.set_modes.append(mode)

    def refresh(self):
        self.refreshes += 1

    def mark_line(self, line: int, message: str):
        self.marks[line] = message
        self.mark_calls.append((line, message))

    def clear_marks(self):
        self.marks.clear()


class ManualScheduler:
    """Collects scheduled callbacks; run_pending() fires them in order."""

    def __init__(self):
        self.pending = []
        self.delays: list[float] = []

    def call_later(self, delay, callback):
        self.delays.append(delay)
        self.pending.append(callback)

    def run_pending(self):
        callbacks, self.pending = self.pending, []
        for callback in callbacks:
            callback()


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def scheduler():
    return ManualScheduler()
