"""
Schema validation tests for the tour client.

Tests the Pydantic models against the content service's wire format.
"""

import pytest

from gotour.schemas import (
    # Catalog
    File,
    Page,
    Lesson,
    Module,
    LessonCatalog,
    # Run
    EventKind,
    RunEvent,
    FormatResult,
)


class TestCatalogSchemas:
    """Test catalog models."""

    def test_lesson_from_wire_names(self):
        lesson = Lesson.model_validate({
            "Title": "Basics",
            "Pages": [{"Title": "Packages", "Files": [
                {"Name": "packages.go", "Content": "package main", "Hash": "abc"}
            ]}],
        })
        assert lesson.title == "Basics"
        assert lesson.pages[0].files[0].hash == "abc"
        assert lesson.pages[0].files[0].orig_content is None
        assert lesson.module is None

    def test_page_order_preserved(self):
        page = Page.model_validate({"Files": [
            {"Name": "b.go", "Content": "", "Hash": "2"},
            {"Name": "a.go", "Content": "", "Hash": "1"},
        ]})
        assert [f.name for f in page.files] == ["b.go", "a.go"]

    def test_file_by_attribute_names(self):
        f = File(name="prog.go", content="x", hash="h")
        assert f.content == "x"

    def test_file_is_modified(self):
        f = File(content="edited", hash="h", orig_content="original")
        assert f.is_modified
        f.content = "original"
        assert not f.is_modified

    def test_module_requires_lessons(self):
        with pytest.raises(ValueError):
            Module(title="Basics")

    def test_catalog_module_of(self):
        lesson = Lesson(title="Welcome")
        lesson.module = 0
        module = Module(title="Intro", lessons=["welcome"])
        module.lesson = {"welcome": lesson}
        catalog = LessonCatalog(modules=[module], lessons={"welcome": lesson})

        assert catalog.module_of("welcome") is catalog.modules[0]
        assert catalog.module_of("missing") is None

    def test_catalog_keeps_lesson_identity(self):
        lesson = Lesson(title="Welcome")
        module = Module(title="Intro", lessons=["welcome"])
        module.lesson = {"welcome": lesson}
        catalog = LessonCatalog(modules=[module], lessons={"welcome": lesson})

        assert catalog.modules[0].lesson["welcome"] is catalog.lessons["welcome"]


class TestRunSchemas:
    """Test run event and formatter models."""

    def test_event_kind_values(self):
        assert EventKind.STDOUT.value == "stdout"
        assert EventKind.STDERR.value == "stderr"
        assert EventKind.END.value == "end"

    def test_run_event_from_wire(self):
        event = RunEvent.model_validate({"Kind": "stderr", "Body": "prog.go:3: oops\n"})
        assert event.is_stderr
        assert not event.is_end

    def test_run_event_end_without_body(self):
        event = RunEvent(kind="end")
        assert event.is_end
        assert event.body == ""

    def test_format_result_ok(self):
        result = FormatResult.model_validate({"Body": "package main\n", "Error": ""})
        assert result.ok
        assert result.body == "package main\n"

    def test_format_result_error(self):
        result = FormatResult.model_validate({"Body": "", "Error": "prog.go:1:1: expected 'package'"})
        assert not result.ok
