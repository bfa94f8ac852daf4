from __future__ import annotations

import argparse
import json
import os
import subprocess
import sys
from typing import Mapping

import yaml

from .errors import EnvLayersError
from .loader import load_env
from .observability import configure_logging, get_logger
from .parser import read_file
from .settings import LoaderSettings, load_settings
from .store import OsEnvironStore

log = get_logger("envlayers.cli")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="envlayers", description="Layered .env loader")
    p.add_argument("--config", default=None, help="YAML settings file")
    p.add_argument("--log-level", default="WARNING", help="log level")

    sub = p.add_subparsers(dest="command", required=True)

    parse_p = sub.add_parser("parse", help="parse a single env file and print it")
    parse_p.add_argument("file")
    parse_p.add_argument("--format", choices=("env", "json", "yaml"), default="env")

    show_p = sub.add_parser("show", help="load all layers and print the result")
    show_p.add_argument("--file", default=None, help="base env file (default from settings)")
    show_p.add_argument("--format", choices=("env", "json", "yaml"), default="env")
    show_p.add_argument("keys", nargs="*", help="only print these variables")

    run_p = sub.add_parser("run", help="load all layers, then run a command")
    run_p.add_argument("--file", default=None, help="base env file (default from settings)")
    run_p.add_argument("cmd", nargs=argparse.REMAINDER, help="command to run (prefix with --)")

    return p


def _quote_env_value(value: str) -> str:
    if not value:
        return ""
    if "'" not in value and "\n" not in value and "\r" not in value and not value.endswith("\\"):
        return f"'{value}'"
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def format_values(values: Mapping[str, str], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(dict(values), ensure_ascii=False, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(dict(values), sort_keys=False, allow_unicode=True).rstrip("\n")
    return "\n".join(f"{k}={_quote_env_value(v)}" for k, v in values.items())


def _load(base: str | None, settings: LoaderSettings) -> dict[str, str]:
    paths = (base,) if base else ()
    return load_env(*paths, store=OsEnvironStore(), settings=settings)


def _run(args: argparse.Namespace, settings: LoaderSettings) -> int:
    if args.command == "parse":
        print(format_values(read_file(args.file), args.format))
        return 0

    if args.command == "show":
        applied = _load(args.file, settings)
        if args.keys:
            values = {k: os.environ[k] for k in args.keys if k in os.environ}
        else:
            values = applied
        print(format_values(values, args.format))
        return 0

    cmd = list(args.cmd)
    if cmd and cmd[0] == "--":
        cmd = cmd[1:]
    if not cmd:
        raise SystemExit("envlayers run: no command given (usage: envlayers run -- CMD [ARGS...])")

    applied = _load(args.file, settings)
    log.info("run_command", argv=cmd, applied=len(applied))
    return subprocess.run(cmd, env=os.environ.copy()).returncode


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        settings = load_settings(args.config)
        return _run(args, settings)
    except EnvLayersError as e:
        log.error("envlayers_failed", exc_info=e)
        print(f"envlayers: {e}", file=sys.stderr)
        return 1
