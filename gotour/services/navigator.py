"""
LessonNavigator - Load the lesson table and walk it.

Provides:
- One-time fetch of GET /tour/eng/lesson/
- Overlay of locally saved edits onto file contents
- Previous/next lesson across module boundaries
- Saving and resetting edited files
"""

import logging
import threading
from concurrent.futures import Executor, Future
from enum import Enum
from typing import Any, Optional

import requests

from gotour.config import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT
from gotour.errors import CatalogError, CatalogNotLoadedError
from gotour.schemas import File, Lesson, LessonCatalog, Module

from .storage import KeyValueStore


logger = logging.getLogger(__name__)

LESSON_PATH = "/tour/eng/lesson/"


class LoadState(str, Enum):
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    FAILED = "failed"


def build_catalog(
    table_of_contents: list[Module],
    lesson_table: dict[str, Any],
    store: KeyValueStore,
) -> LessonCatalog:
    """
    Join the table of contents with the fetched lesson table.

    Each lesson gets the index of its module, each module gets its lesson
    mapping, and each file keeps its server content in orig_content before
    any saved edit replaces content.

    Raises:
        CatalogError: If the table is not a mapping, or a listed lesson is
            missing or listed twice
    """
    if not isinstance(lesson_table, dict):
        raise CatalogError(f"Expected a lesson mapping, got {type(lesson_table).__name__}")

    modules = [module.model_copy(deep=True) for module in table_of_contents]
    lessons: dict[str, Lesson] = {}

    for idx, module in enumerate(modules):
        module.lesson = {}
        for name in module.lessons:
            if name not in lesson_table:
                raise CatalogError(f"Lesson {name!r} is listed but was not delivered")
            if name in lessons:
                raise CatalogError(f"Lesson {name!r} is listed in more than one module")

            lesson = Lesson.model_validate(lesson_table[name])
            lesson.module = idx
            module.lesson[name] = lesson
            lessons[name] = lesson

            for page in lesson.pages:
                for f in page.files:
                    f.orig_content = f.content
                    saved = store.get(f.hash)
                    if saved is not None:
                        f.content = saved

    return LessonCatalog(modules=modules, lessons=lessons)


class LessonNavigator:
    """
    Navigate the tour's modules and lessons.

    `modules` and `lessons` are futures resolved once by load(); if the
    fetch fails both fail with the same exception. Navigation before a
    successful load raises CatalogNotLoadedError.
    """

    def __init__(
        self,
        table_of_contents: list[Module],
        store: KeyValueStore,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        """
        Initialize navigator.

        Args:
            table_of_contents: Ordered modules (see utils.toc_loader)
            store: KeyValueStore holding saved edits keyed by file hash
            base_url: Content service base URL
            session: Optional requests session
            timeout: HTTP timeout in seconds
        """
        self.table_of_contents = table_of_contents
        self.store = store
        self.url = base_url.rstrip("/") + LESSON_PATH
        self.session = session or requests.Session()
        self.timeout = timeout

        self.modules: Future = Future()
        self.lessons: Future = Future()
        self._catalog: Optional[LessonCatalog] = None
        self._load_lock = threading.Lock()
        self._load_started = False

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def fetch_lesson_table(self) -> dict[str, Any]:
        """GET the lesson table. Raises requests.RequestException on failure."""
        response = self.session.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def load(self):
        """
        Fetch and build the catalog. Only the first call does anything.

        Failures are logged and delivered through the futures, which are
        always completed.
        """
        with self._load_lock:
            if self._load_started:
                return
            self._load_started = True

        try:
            catalog = build_catalog(self.table_of_contents, self.fetch_lesson_table(), self.store)
        except Exception as e:
            logger.error(f"error loading lessons : {e}")
            self.modules.set_exception(e)
            self.lessons.set_exception(e)
            return

        self._catalog = catalog
        logger.info(f"Loaded {len(catalog.lessons)} lessons in {len(catalog.modules)} modules")
        self.modules.set_result(catalog.modules)
        self.lessons.set_result(catalog.lessons)

    def start(self, executor: Executor) -> Future:
        """Run load() on an executor; returns the `lessons` future."""
        executor.submit(self.load)
        return self.lessons

    @property
    def state(self) -> LoadState:
        if not self.lessons.done():
            return LoadState.NOT_LOADED
        if self.lessons.exception() is not None:
            return LoadState.FAILED
        return LoadState.LOADED

    @property
    def catalog(self) -> LessonCatalog:
        if self._catalog is None:
            raise CatalogNotLoadedError("Lessons are not loaded yet")
        return self._catalog

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def _position(self, lesson_id: str) -> tuple[int, int]:
        """(module index, lesson index within module), or (-1, -1)."""
        catalog = self.catalog
        module = catalog.module_of(lesson_id)
        if module is None or lesson_id not in module.lessons:
            return -1, -1
        return catalog.lessons[lesson_id].module, module.lessons.index(lesson_id)

    def prev_lesson(self, lesson_id: str) -> str:
        """
        Get the lesson before lesson_id.

        Returns "" for the first lesson of the first module or an unknown id.
        """
        mod_idx, idx = self._position(lesson_id)
        if idx < 0:
            return ""
        modules = self.catalog.modules
        if idx > 0:
            return modules[mod_idx].lessons[idx - 1]

        if mod_idx <= 0:
            return ""
        prev_module = modules[mod_idx - 1]
        return prev_module.lessons[-1] if prev_module.lessons else ""

    def next_lesson(self, lesson_id: str) -> str:
        """
        Get the lesson after lesson_id.

        Returns "" for the last lesson of the last module or an unknown id.
        """
        mod_idx, idx = self._position(lesson_id)
        if idx < 0:
            return ""
        modules = self.catalog.modules
        module = modules[mod_idx]
        if idx + 1 < len(module.lessons):
            return module.lessons[idx + 1]

        if mod_idx + 1 >= len(modules):
            return ""
        next_module = modules[mod_idx + 1]
        return next_module.lessons[0] if next_module.lessons else ""

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def save_file(self, f: File, content: str):
        """Keep the student's version of a file."""
        f.content = content
        self.store.set(f.hash, content)

    def reset_file(self, f: File):
        """Drop the saved version and restore the server content."""
        if f.orig_content is not None:
            f.content = f.orig_content
        self.store.delete(f.hash)
