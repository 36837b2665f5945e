"""Command line interface for Conduit."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from .commands.auth import PROVIDERS, models_auth_add_command
from .config import ChatConfig
from .runtime import ConsolePrompter, Prompter, RuntimeEnv, default_runtime


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="conduit", description="Conversational agent client utilities")
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to CONDUIT_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    models_parser = subparsers.add_parser("models", help="manage model providers")
    models_sub = models_parser.add_subparsers(dest="models_command", required=True)

    auth_parser = models_sub.add_parser("auth", help="manage provider credentials")
    auth_sub = auth_parser.add_subparsers(dest="auth_command", required=True)

    add_parser = auth_sub.add_parser("add", help="add a provider credential interactively")
    add_parser.add_argument("--provider", choices=sorted(PROVIDERS), help="Skip the provider prompt")
    add_parser.add_argument("--method", help="Skip the auth method prompt")

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    config = ChatConfig.from_env(os.environ)
    level = (args.log_level or config.log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _handle_auth_add(args: argparse.Namespace, runtime: RuntimeEnv, prompter: Prompter) -> int:
    models_auth_add_command(
        {"provider": args.provider, "method": args.method},
        runtime,
        prompter,
    )
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    runtime: RuntimeEnv | None = None,
    prompter: Prompter | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    runtime = runtime or default_runtime()
    prompter = prompter or ConsolePrompter()
    if args.command == "models" and args.models_command == "auth" and args.auth_command == "add":
        return _handle_auth_add(args, runtime, prompter)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
