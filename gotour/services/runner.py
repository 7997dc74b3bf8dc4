"""
Runner - Execute code archives and map compiler errors onto the editor.

Code is a txtar-style archive: sections start with a "-- name --" line.
Snippets are built in module mode, so a minimal go.mod is appended when the
archive does not carry one.

Each streamed event is inspected before it reaches the output sink: stderr
lines of the form "prog.go:12: message" highlight line 12 in the editor.
"""

import logging
import re
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Protocol

from gotour.config import DEFAULT_GO_VERSION
from gotour.schemas import EventKind, RunEvent


logger = logging.getLogger(__name__)

GO_MOD_HEADER = "-- go.mod --\n"
GO_SUM_HEADER = "-- go.sum --\n"
DEFAULT_MODULE_NAME = "example"

ERROR_LINE_RE = re.compile(r".*\.go:([0-9]+): ([^\n]*)")

Event = RunEvent | Mapping[str, Any]
OutputSink = Callable[[Event], object]


class Transport(Protocol):
    """Execution backend. Delivers events in order, ending with one "end"."""

    def run(self, code: str, on_event: OutputSink, options: Mapping[str, Any]) -> Any: ...


class Highlighter(Protocol):
    def highlight(self, line, message: str) -> None: ...


def has_module_manifest(code: str) -> bool:
    return ("\n" + GO_MOD_HEADER) in code or code.startswith(GO_MOD_HEADER)


def ensure_module_manifest(
    code: str,
    module: str = DEFAULT_MODULE_NAME,
    go_version: str = DEFAULT_GO_VERSION,
) -> str:
    """Append go.mod and an empty go.sum unless the archive has a go.mod."""
    if has_module_manifest(code):
        return code
    return (
        code
        + "\n" + GO_MOD_HEADER
        + f"module {module}\n\n"
        + f"go {go_version}\n"
        + GO_SUM_HEADER
    )


def parse_error_lines(body: str) -> list[tuple[str, str]]:
    """
    Extract (line, message) pairs from compiler output.

    Lines that don't look like "<file>.go:<line>: <message>" are skipped.
    """
    matches = []
    for text in body.split("\n"):
        m = ERROR_LINE_RE.search(text)
        if m is not None:
            matches.append((m.group(1), m.group(2)))
    return matches


def _kind_and_body(event: Event) -> tuple[str, str]:
    if isinstance(event, RunEvent):
        return event.kind, event.body
    return event.get("Kind", ""), event.get("Body") or ""


class Runner:
    """Run snippets through a transport, annotating the editor on errors."""

    def __init__(
        self,
        transport: Transport,
        editor: Highlighter,
        module: str = DEFAULT_MODULE_NAME,
        go_version: str = DEFAULT_GO_VERSION,
    ):
        self.transport = transport
        self.editor = editor
        self.module = module
        self.go_version = go_version

    def _annotate(self, event: Event) -> str:
        kind, body = _kind_and_body(event)
        if kind == EventKind.STDERR.value:
            for line, message in parse_error_lines(body):
                self.editor.highlight(line, message)
        return kind

    def interceptor(
        self,
        output: OutputSink,
        done: Optional[Callable[[], object]] = None,
    ) -> OutputSink:
        """
        Wrap an output sink.

        Highlights are applied before the event is forwarded; done() runs
        after the "end" event has been forwarded, once.
        """
        finished = False

        def on_event(event: Event):
            nonlocal finished
            kind = self._annotate(event)
            output(event)
            if kind == EventKind.END.value and done is not None and not finished:
                finished = True
                done()

        return on_event

    def intercept(self, events: Iterable[Event]) -> Iterator[Event]:
        """Yield events unchanged, highlighting errors before each is yielded."""
        for event in events:
            self._annotate(event)
            yield event

    def run(
        self,
        code: str,
        output: OutputSink,
        options: Optional[Mapping[str, Any]] = None,
        done: Optional[Callable[[], object]] = None,
    ):
        """
        Start one run.

        Args:
            code: txtar archive (or a single Go file)
            output: Receives every event, unmodified and in order
            options: Passed to the transport as is
            done: Called after the "end" event is delivered

        Returns:
            Whatever handle the transport returns
        """
        code = ensure_module_manifest(code, self.module, self.go_version)
        logger.debug(f"Starting run ({len(code)} bytes)")
        if options is None:
            options = {}
        return self.transport.run(code, self.interceptor(output, done), options)
