"""
Go tour services - Runtime components used by the tour page.

This module provides:
- KeyValueStore: local persistence for edits and preferences
- Translator, Analytics: UI strings and page-view beacon
- CodeFormatter: remote gofmt
- EditorContext: display toggles and error marks
- Runner: code execution with error highlighting
- LessonNavigator: lesson table loading and prev/next navigation
"""

from .storage import (
    KeyValueStore,
    LocalStore,
    MemoryStore,
    NullStore,
    open_store,
)

from .i18n import (
    Translator,
    load_translations,
    TRANSLATIONS_DIR,
)

from .analytics import Analytics

from .formatter import CodeFormatter

from .editor import (
    EditorContext,
    EditorSurface,
    Scheduler,
    TimerScheduler,
    MODE_SYNTAX,
    MODE_PLAIN,
)

from .runner import (
    Runner,
    Transport,
    ensure_module_manifest,
    has_module_manifest,
    parse_error_lines,
)

from .navigator import (
    LessonNavigator,
    LoadState,
    build_catalog,
    LESSON_PATH,
)

__all__ = [
    # Storage
    "KeyValueStore",
    "LocalStore",
    "MemoryStore",
    "NullStore",
    "open_store",
    # i18n / analytics
    "Translator",
    "load_translations",
    "TRANSLATIONS_DIR",
    "Analytics",
    # Formatter
    "CodeFormatter",
    # Editor
    "EditorContext",
    "EditorSurface",
    "Scheduler",
    "TimerScheduler",
    "MODE_SYNTAX",
    "MODE_PLAIN",
    # Runner
    "Runner",
    "Transport",
    "ensure_module_manifest",
    "has_module_manifest",
    "parse_error_lines",
    # Navigator
    "LessonNavigator",
    "LoadState",
    "build_catalog",
    "LESSON_PATH",
]
