"""CLI entry point for fieldcheck."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import cast

from fieldcheck import __version__
from fieldcheck.config import load_validation_config
from fieldcheck.rule_engine.engine import ValidationEngine
from fieldcheck.rule_engine.report import build_report
from fieldcheck.server.runner import configure_logging, run_server
from fieldcheck.store.rule_store import RuleStore


def _rules_path(args: argparse.Namespace) -> Path:
    explicit = cast(Path | None, args.rules)
    if explicit is not None:
        return explicit
    return load_validation_config().rules_file


def _cmd_serve(args: argparse.Namespace) -> None:
    config = load_validation_config()
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    if args.rules:
        config.rules_path = str(args.rules)
    if args.log_level:
        config.log_level = args.log_level
    run_server(config)


def _cmd_validate(args: argparse.Namespace) -> None:
    record_path = cast(Path, args.record)
    try:
        record = json.loads(record_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: cannot read record {record_path}: {e}", file=sys.stderr)
        sys.exit(2)
    if not isinstance(record, dict):
        print(f"Error: {record_path} must contain a JSON object", file=sys.stderr)
        sys.exit(2)

    engine = ValidationEngine(RuleStore(_rules_path(args)).load_rules())
    report = build_report(engine.validate(record))
    if args.only_failed:
        report.pop("passed")
    print(json.dumps(report, indent=2, default=str))
    if not report["valid"]:
        sys.exit(1)


def _cmd_rules(args: argparse.Namespace) -> None:
    rules = RuleStore(_rules_path(args)).load_rules()
    if not rules:
        print("No rules loaded.")
        return
    for rule in rules:
        state = "enabled" if rule.enabled else "disabled"
        print(f"{rule.id:<30} {rule.rule_type:<13} {rule.target.field:<20} {state}")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="fieldcheck",
        description="Rule-driven validation for flat records",
    )
    _ = parser.add_argument(
        "-V", "--version", action="version", version=f"fieldcheck {__version__}"
    )
    _ = parser.add_argument("--log-level", default=None, help="Logging level (default: config)")
    subparsers = parser.add_subparsers(dest="command")

    serve_p = subparsers.add_parser("serve", help="Run the HTTP API")
    _ = serve_p.add_argument("--host", default=None)
    _ = serve_p.add_argument("--port", type=int, default=None)
    _ = serve_p.add_argument("--rules", type=Path, default=None, help="Rules JSON file")

    validate_p = subparsers.add_parser("validate", help="Validate a JSON record file")
    _ = validate_p.add_argument("record", type=Path, help="Path to a JSON object")
    _ = validate_p.add_argument("--rules", type=Path, default=None, help="Rules JSON file")
    _ = validate_p.add_argument(
        "--only-failed",
        action="store_true",
        dest="only_failed",
        help="Omit passed results from the report",
    )

    rules_p = subparsers.add_parser("rules", help="List stored rules")
    _ = rules_p.add_argument("--rules", type=Path, default=None, help="Rules JSON file")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command != "serve":
        configure_logging(args.log_level or load_validation_config().log_level)

    handlers = {
        "serve": _cmd_serve,
        "validate": _cmd_validate,
        "rules": _cmd_rules,
    }
    handlers[cast(str, args.command)](args)


if __name__ == "__main__":
    main()
