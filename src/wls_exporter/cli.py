"""
Command-line tool for exporter configuration files.

Usage examples:

  # Check that configuration files load
  wls-exporter-config validate config.yml extra-queries.yml

  # Print the combined configuration
  wls-exporter-config show config.yml --append extra-queries.yml

  # Print the search request bodies for each query
  wls-exporter-config request config.yml

Exit codes:
  0 = success
  1 = one or more configuration files are invalid
  2 = bad arguments
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from .configuration import ConfigurationBuilder, MergeMode, load_configuration_from_file
from .infrastructure.exceptions import WlsExporterException
from .infrastructure.logging_setup import LogFormat, setup_logging
from .scraping import build_query_request


def cmd_validate(args) -> int:
    all_valid = True
    for path in args.files:
        try:
            config = load_configuration_from_file(path)
        except WlsExporterException as e:
            all_valid = False
            print(f"{path}: INVALID [{e.error_code}] {e.message}")
            continue
        print(f"{path}: OK ({len(config.queries)} queries)")
    return 0 if all_valid else 1


def cmd_show(args) -> int:
    builder = ConfigurationBuilder().add_yaml_source(args.file)
    for path in args.append or []:
        builder.add_yaml_source(path, MergeMode.APPEND)
    if args.replace:
        builder.add_yaml_source(args.replace, MergeMode.REPLACE)

    try:
        config = builder.build()
    except WlsExporterException as e:
        print(f"error: [{e.error_code}] {e.message}", file=sys.stderr)
        return 1
    sys.stdout.write(str(config))
    return 0


def cmd_request(args) -> int:
    try:
        config = load_configuration_from_file(args.file)
    except WlsExporterException as e:
        print(f"error: [{e.error_code}] {e.message}", file=sys.stderr)
        return 1
    requests = [build_query_request(query) for query in config.queries]
    print(json.dumps(requests, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wls-exporter-config", description="Inspect WebLogic exporter configuration files")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    ap.add_argument("--log-format", choices=[f.value for f in LogFormat], default=LogFormat.PRETTY.value, help="Log output format")
    sub = ap.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check that configuration files load")
    validate.add_argument("files", nargs="+", help="YAML configuration files")
    validate.set_defaults(func=cmd_validate)

    show = sub.add_parser("show", help="Print the (combined) configuration as YAML")
    show.add_argument("file", help="Base configuration; supplies the connection settings")
    show.add_argument("--append", action="append", help="Configuration whose queries are appended (repeatable)")
    show.add_argument("--replace", help="Configuration whose queries replace all earlier ones")
    show.set_defaults(func=cmd_show)

    request = sub.add_parser("request", help="Print the search request body of each query")
    request.add_argument("file", help="YAML configuration file")
    request.set_defaults(func=cmd_request)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        setup_logging(args.log_level, args.log_format)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
