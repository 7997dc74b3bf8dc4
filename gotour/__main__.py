"""
Command-line access to the tour services.

Usage:
  python -m gotour fmt prog.go --imports
  python -m gotour nav flowcontrol
  python -m gotour toc
"""

import argparse
import logging
import sys
from pathlib import Path

import requests

from gotour.config import load_settings
from gotour.errors import TourError
from gotour.services import CodeFormatter, LessonNavigator, Translator, open_store
from gotour.utils import load_table_of_contents

logger = logging.getLogger(__name__)


def cmd_fmt(args, settings) -> int:
    formatter = CodeFormatter(settings.base_url, timeout=settings.http_timeout)
    source = args.file.read_text(encoding="utf-8")
    result = formatter.format(source, args.imports)
    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1
    print(result.body, end="")
    return 0


def _load_navigator(args, settings) -> LessonNavigator:
    navigator = LessonNavigator(
        load_table_of_contents(args.toc),
        open_store(settings.store_path),
        base_url=settings.base_url,
        timeout=settings.http_timeout,
    )
    navigator.load()
    navigator.lessons.result()  # re-raises the load error
    return navigator


def cmd_nav(args, settings) -> int:
    navigator = _load_navigator(args, settings)
    if args.lesson not in navigator.catalog.lessons:
        print(f"Unknown lesson: {args.lesson}", file=sys.stderr)
        return 1

    tr = Translator.for_language(settings.lang)
    print(f"{tr.l('prev')}: {navigator.prev_lesson(args.lesson) or '-'}")
    print(f"{tr.l('next')}: {navigator.next_lesson(args.lesson) or '-'}")
    return 0


def cmd_toc(args, settings) -> int:
    navigator = _load_navigator(args, settings)
    for module in navigator.catalog.modules:
        print(module.title)
        for name in module.lessons:
            lesson = module.lesson[name]
            print(f"  {name}: {lesson.title} ({len(lesson.pages)} pages)")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="gotour",
        description="Format code and navigate lessons against a tour backend",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Optional .env file with GOTOUR_* settings"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_fmt = sub.add_parser("fmt", help="Format a Go source file")
    p_fmt.add_argument("file", type=Path, help="Go source file")
    p_fmt.add_argument("--imports", action="store_true", help="Also fix imports")
    p_fmt.set_defaults(func=cmd_fmt)

    for name, func, help_text in (
        ("nav", cmd_nav, "Show the lessons before and after LESSON"),
        ("toc", cmd_toc, "Print the table of contents"),
    ):
        p = sub.add_parser(name, help=help_text)
        if name == "nav":
            p.add_argument("lesson", help="Lesson name, e.g. flowcontrol")
        p.add_argument("--toc", type=Path, default=None, help="Custom table of contents YAML")
        p.set_defaults(func=func)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    settings = load_settings(args.env_file)
    try:
        return args.func(args, settings)
    except (requests.RequestException, TourError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
