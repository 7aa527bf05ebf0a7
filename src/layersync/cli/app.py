"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from layersync.cli.commands.replay import run_replay
from layersync.cli.parser import build_parser
from layersync.contracts.exceptions import ConfigError, LayerSyncError, ScenarioError, ScenarioLoadError


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "replay":
            result = run_replay(args)
            return 0 if result.in_sync else 5
        print(f"error: unsupported command: {args.command}", file=sys.stderr)
        return 2
    except (ConfigError, ScenarioLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ScenarioError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except LayerSyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
