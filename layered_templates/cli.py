"""Command line interface for inspecting and watching template stores.

Store selection comes from ``TEMPLATES_FORMAT`` / ``TEMPLATES_DEFAULT_FILE`` /
``TEMPLATES_PARTIAL_FILE`` unless overridden by ``--format`` / ``--default`` /
``--partial``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from collections.abc import Sequence

from .audit import audit_overrides
from .config import StoreConfig, build_resolver, load_store_config
from .constants import TEMPLATES_POLL_INTERVAL
from .errors import ConfigurationError, TemplateError
from .errors.handling import log_error
from .loader import get_loader
from .logging_config import LoggerConfigurator, error_aggregator
from .logs.logger import logger
from .render import apply_template
from .store import FileStore


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="layered-templates",
        description="Resolve templates from default + override template files",
    )
    parser.add_argument("--format", help="Template file format (json, toml, yaml)")
    parser.add_argument("--default", dest="default_path", help="Default templates file")
    parser.add_argument("--partial", dest="partial_path", help="Override templates file")
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="Print the template for NAMESPACE NAME")
    resolve.add_argument("namespace")
    resolve.add_argument("name")
    resolve.add_argument(
        "--arg",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Render the template with this argument (repeatable)",
    )

    sub.add_parser("show", help="Print the merged templates as JSON")

    audit = sub.add_parser("audit", help="Check overrides against the defaults")
    audit.add_argument(
        "--json-output", action="store_true", help="Emit JSON audit result"
    )

    watch = sub.add_parser("watch", help="Poll the templates and log reloads")
    watch.add_argument("--interval", type=float, default=TEMPLATES_POLL_INTERVAL)
    watch.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Stop after this many polls (default: run until interrupted)",
    )
    return parser.parse_args(argv)


def _parse_template_args(pairs: Sequence[str]) -> dict[str, str]:
    args: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"expected KEY=VALUE, got {pair!r}")
        args[key] = value
    return args


def build_config(args: argparse.Namespace) -> StoreConfig:
    """Merge command line overrides on top of the environment config."""
    config = load_store_config()
    overrides = {
        key: value
        for key, value in (
            ("format", args.format),
            ("default_path", args.default_path),
            ("partial_path", args.partial_path),
        )
        if value is not None
    }
    if not overrides:
        return config
    try:
        return StoreConfig(**{**config.model_dump(), **overrides})
    except ValueError as e:
        raise ConfigurationError(f"invalid command line configuration: {e}") from e


def cmd_resolve(args: argparse.Namespace, config: StoreConfig) -> int:
    resolver = build_resolver(config)
    template = resolver.resolve(args.namespace, args.name)
    if template is None:
        logger.log_event(
            "cli",
            "resolve_missing",
            level=logging.WARNING,
            namespace=args.namespace,
            name=args.name,
        )
        return 1
    if not args.arg:
        print(template)
        return 0
    rendered = apply_template(template, _parse_template_args(args.arg))
    if rendered is None:
        logger.log_event(
            "cli",
            "render_failed",
            level=logging.ERROR,
            namespace=args.namespace,
            name=args.name,
        )
        return 1
    print(rendered)
    return 0


def cmd_show(config: StoreConfig) -> int:
    resolver = build_resolver(config)
    print(json.dumps(resolver.templates.as_dict(), indent=2, sort_keys=True))
    return 0


def cmd_audit(args: argparse.Namespace, config: StoreConfig) -> int:
    if config.default_path is None or config.partial_path is None:
        raise ConfigurationError("audit needs both a default and a partial file")
    loader = get_loader(config.format)
    default = FileStore(config.default_path, loader).data()
    partial = FileStore(config.partial_path, loader).data()
    result = audit_overrides(default, partial)
    if args.json_output:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print("Template Override Audit Report")
        print("==============================")
        if result.unknown:
            print(f"Unknown overrides ({len(result.unknown)}):")
            for namespace, name in sorted(result.unknown):
                print(f"  - {namespace}.{name}")
        else:
            print("No unknown overrides found.")
        if result.mismatched:
            print(f"Placeholder mismatches ({len(result.mismatched)}):")
            for m in result.mismatched:
                print(
                    f"  - {m.namespace}.{m.name}: default {sorted(m.default)}"
                    f" vs override {sorted(m.override)}"
                )
        else:
            print("No placeholder mismatches found.")
    return 0 if result.ok else 1


def cmd_watch(args: argparse.Namespace, config: StoreConfig) -> int:
    resolver = build_resolver(config)
    error_aggregator.reset()
    logger.log_event("cli", "watch_start", interval=args.interval)
    polls = 0
    try:
        while args.iterations is None or polls < args.iterations:
            polls += 1
            try:
                if resolver.templates.refresh():
                    logger.log_event(
                        "cli", "watch_reload", namespaces=len(resolver.templates)
                    )
            except TemplateError as e:
                log_error("Template refresh failed", e, level=logging.WARNING)
            if args.iterations is None or polls < args.iterations:
                time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    logger.log_event("cli", "watch_stop")
    error_aggregator.log_summary_report()
    return 0


def main(argv: Sequence[str] | None = None, *, configure_logging: bool = True) -> int:
    args = parse_args(argv)
    if configure_logging:
        LoggerConfigurator().configure()
    try:
        config = build_config(args)
        if args.command == "resolve":
            return cmd_resolve(args, config)
        if args.command == "show":
            return cmd_show(config)
        if args.command == "audit":
            return cmd_audit(args, config)
        return cmd_watch(args, config)
    except (TemplateError, ValueError) as e:
        log_error(f"{args.command} failed", e)
        return 2


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
