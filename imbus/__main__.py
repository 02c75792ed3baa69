"""
imbus/__main__.py

Entry point for the IMBUS proxy CLI.
"""

import argparse
import logging
import sys

from .config import FieldConfig
from .constants import PROXY_NAMES
from .logs import get_logger
from .output import OutputWriter
from .run import run_from_directory
from .validation import ImbusError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imbus",
        description="Calculate fishing mortality proxies from survey effort data."
    )
    parser.add_argument("--input", type=str, required=True,
                        help="Directory with effort.csv, spatial.csv and optional species.csv, gear_efficiency.csv.")
    parser.add_argument("--proxies", nargs="+", choices=PROXY_NAMES, default=list(PROXY_NAMES),
                        help="Proxies to calculate (default: all computable).")
    parser.add_argument("--config", type=str, help="YAML file with the column mapping.")
    parser.add_argument("--unfished", action="store_true",
                        help="Include unfished spatial units with zero effort.")
    parser.add_argument("--no-aggregate", action="store_true",
                        help="Do not sum swept area per gear, spatial unit and time.")
    parser.add_argument("--output", type=str, help="Directory to write proxies.csv to.")
    parser.add_argument("--log-dir", type=str, default=None, help="Directory for log files.")
    parser.add_argument("--loglevel", type=str, default="INFO", help="Set logging level.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_dir:
        get_logger(run_name="imbus", log_dir=args.log_dir, level=args.loglevel)
    else:
        logging.basicConfig(level=getattr(logging, args.loglevel.upper(), logging.INFO))

    try:
        config = FieldConfig.from_yaml(args.config) if args.config else None
        result = run_from_directory(
            args.input,
            proxies=args.proxies,
            config=config,
            fished=not args.unfished,
            aggregate=not args.no_aggregate,
        )
    except (ImbusError, FileNotFoundError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    if args.output:
        path = OutputWriter(args.output).write_result(result)
        print(f"[RUN] Wrote {len(result)} rows ({', '.join(result.proxies)}) to {path}")
    else:
        print(f"[RUN] Path: {result.path.value}; proxies: {', '.join(result.proxies)}; rows: {len(result)}")
        print(result.table.head(20).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
