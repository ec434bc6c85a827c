"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from aicowork.cli.common import print_error
from aicowork.contracts.exceptions import (
    ConfigError,
    CoworkError,
    InvalidStackError,
    NotInitializedError,
    UnknownToolError,
)


def main(argv: list[str] | None = None) -> int:
    import aicowork.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    handler = cli.COMMANDS[args.command]
    try:
        return handler(args)
    except (InvalidStackError, UnknownToolError) as exc:
        print_error(str(exc))
        return 2
    except (ConfigError, NotInitializedError) as exc:
        print_error(str(exc))
        return 3
    except CoworkError as exc:  # pragma: no cover
        print_error(str(exc))
        return 1
    except Exception as exc:  # pragma: no cover
        print_error(str(exc))
        return 1


__all__ = ["main"]
