"""CLI entry point: python -m guidebook <command>."""

from __future__ import annotations

import argparse
import logging
import sys

from guidebook.config import load_config, resolve_root
from guidebook.errors import ConfigError

PIPELINE_COMMANDS = {
    "lint": "Structural and prose lint (read-only)",
    "format": "Rewrite markdown formatting in place",
    "check": "Format check plus both linters (read-only)",
    "fix": "Format in place, then run both linters",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guidebook",
        description="Scaffold and validate knowledge-base guides",
    )
    parser.add_argument("--root", default="", help="Repository root (default: $GUIDEBOOK_ROOT or cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    new = sub.add_parser("new", help="Create a guide from its category template")
    new.add_argument("name", nargs="?", default="", help="Filename stem, e.g. rebase-strategies")
    new.add_argument("type", nargs="?", default="", help="Category: how or why")

    for name, help_text in PIPELINE_COMMANDS.items():
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--json", action="store_true", default=False, help="Output as JSON")

    sub.add_parser("sync", help="Download the prose linter's style packages")
    setup = sub.add_parser("setup", help="Install the pre-commit hook")
    setup.add_argument("--force", action="store_true", default=False, help="Replace an existing hook")
    sub.add_parser("pre-commit", help="Run check mode as a commit gate")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    root = resolve_root(args.root)
    try:
        config = load_config(root)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.command == "new":
        from guidebook.cli.scaffold import run_new
        code = run_new(args, root, config)
    elif args.command in PIPELINE_COMMANDS:
        from guidebook.cli.validate import run_mode
        code = run_mode(args, root, config)
    elif args.command == "sync":
        from guidebook.cli.validate import run_sync
        code = run_sync(args, root, config)
    elif args.command == "setup":
        from guidebook.cli.validate import run_setup
        code = run_setup(args, root, config)
    else:
        from guidebook.cli.validate import run_pre_commit
        code = run_pre_commit(args, root, config)

    sys.exit(code)


if __name__ == "__main__":
    main()
