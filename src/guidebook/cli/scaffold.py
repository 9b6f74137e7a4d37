"""CLI handler for ``guidebook new NAME TYPE``."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from guidebook.config import GuidebookConfig
from guidebook.errors import AlreadyExistsError, UsageError
from guidebook.scaffold.engine import create_guide, next_steps


def run_new(args: Namespace, root: Path, config: GuidebookConfig) -> int:
    try:
        path = create_guide(args.name, args.type, root=root)
    except UsageError as exc:
        print(str(exc), file=sys.stderr)
        if exc.usage not in str(exc):
            print(exc.usage, file=sys.stderr)
        return 1
    except AlreadyExistsError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Created {path.relative_to(root).as_posix()}")
    print("")
    print("Next steps:")
    for step in next_steps(args.type, config):
        print(f"  {step}")
    return 0
