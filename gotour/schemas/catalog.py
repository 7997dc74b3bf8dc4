"""
Catalog schemas for the Go tour.

Defines Pydantic models for the tour content hierarchy:
- Module: table-of-contents entry grouping lessons
- Lesson, Page, File: content delivered by the lesson endpoint
- LessonCatalog: the loaded, navigable result
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# WIRE NAMES: the content service delivers Go-style field names ("Pages",
# "Files", "Content", "Hash"). They are aliases; attributes are snake_case.
# =============================================================================


class TourModel(BaseModel):
    """Base model accepting both wire names and attribute names."""
    model_config = ConfigDict(populate_by_name=True)


# -----------------------------------------------------------------------------
# Content delivered by GET /tour/eng/lesson/
# -----------------------------------------------------------------------------

class File(TourModel):
    """A source file shown in the editor."""
    name: str = Field(default="", alias="Name")
    content: str = Field(default="", alias="Content")
    hash: str = Field(default="", alias="Hash")  # storage key for local edits
    orig_content: Optional[str] = Field(default=None, alias="OrigContent")

    @property
    def is_modified(self) -> bool:
        return self.orig_content is not None and self.content != self.orig_content


class Page(TourModel):
    """One screen of a lesson."""
    title: str = Field(default="", alias="Title")
    content: str = Field(default="", alias="Content")
    files: list[File] = Field(default_factory=list, alias="Files")


class Lesson(TourModel):
    """
    A named unit of content made of ordered pages.

    `module` is the index of the owning module in the catalog. It is set once
    while the catalog is built and is never a pointer to the Module itself.
    """
    title: str = Field(default="", alias="Title")
    description: str = Field(default="", alias="Description")
    pages: list[Page] = Field(default_factory=list, alias="Pages")
    module: Optional[int] = Field(default=None, exclude=True)


# -----------------------------------------------------------------------------
# Table of contents
# -----------------------------------------------------------------------------

class Module(TourModel):
    """Top-level grouping of lessons in the table of contents."""
    title: str
    description: str = ""
    lessons: list[str]                                     # ordered lesson names
    lesson: dict[str, Lesson] = Field(default_factory=dict, exclude=True)  # filled at load


class LessonCatalog(BaseModel):
    """
    Modules and lessons after a complete load.

    Built once by the loader and treated as read-only by consumers; the only
    mutations are the file overlay helpers used when the student edits code.
    """
    modules: list[Module]
    lessons: dict[str, Lesson]

    def module_of(self, lesson_id: str) -> Optional[Module]:
        """Get the module that owns a lesson, or None if unknown."""
        lesson = self.lessons.get(lesson_id)
        if lesson is None or lesson.module is None:
            return None
        if not 0 <= lesson.module < len(self.modules):
            return None
        return self.modules[lesson.module]

    def iter_files(self):
        """Yield every file in table-of-contents order."""
        for module in self.modules:
            for name in module.lessons:
                for page in module.lesson[name].pages:
                    yield from page.files

    def find_file(self, file_hash: str) -> Optional[File]:
        """Get a file by its content hash."""
        for f in self.iter_files():
            if f.hash == file_hash:
                return f
        return None
