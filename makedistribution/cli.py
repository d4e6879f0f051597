from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv

from . import api
from .endpoints import Operation
from .errors import MakeDistributionError
from .settings import DEFAULT_VERSION, initialize_api

logger = logging.getLogger("makedistribution.cli")

QUERY_COMMANDS = {
    "pdf": Operation.DENSITY,
    "cdf": Operation.CUMULATIVE,
    "qf": Operation.QUANTILE,
}


def _number(raw: str) -> float:
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def _json_arguments(raw: str) -> Dict[str, Any]:
    try:
        text = Path(raw[1:]).read_text(encoding="utf-8") if raw.startswith("@") else raw
    except OSError as exc:
        raise argparse.ArgumentTypeError(f"cannot read --arguments file: {exc}") from exc
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"--arguments is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError("--arguments must be a JSON object")
    return data


def _add_distribution_opts(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--path", help="Path of an existing distribution, e.g. /1d/dists/<id>")
    parser.add_argument("--family", help="Distribution family to create, e.g. cinterp5_01")
    parser.add_argument(
        "--arguments",
        type=_json_arguments,
        help="Family arguments as a JSON object, or @file.json",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="makedistribution",
        description="Query makedistribution.com distributions",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--token", help="API token (defaults to $MAKEDISTRIBUTION_API_TOKEN)")
    parser.add_argument("--api-version", default=DEFAULT_VERSION, help="API version")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, op in QUERY_COMMANDS.items():
        cmd = sub.add_parser(
            name,
            help=f"Evaluate the {op.name.lower()} function",
            epilog="Put values after -- when one looks like an option, e.g. -- -1e-3 2",
        )
        cmd.add_argument(
            "values",
            nargs="+",
            type=_number,
            help=f"Values for '{op.param}' (use -- before negative exponents such as -1e-3)",
        )
        _add_distribution_opts(cmd)

    samples = sub.add_parser("samples", help="Draw random samples")
    samples.add_argument("size", type=int, help="Number of samples")
    _add_distribution_opts(samples)

    info = sub.add_parser("info", help="Show distribution metadata and fit status")
    info.add_argument("path", help="Path of an existing distribution")
    return parser


def run(args: argparse.Namespace) -> Any:
    settings = initialize_api(token=args.token, version=args.api_version)
    if args.command == "info":
        return api.get_distribution(args.path, settings=settings)
    if args.command == "samples":
        op, value = Operation.SAMPLE, args.size
    else:
        op, value = QUERY_COMMANDS[args.command], args.values
    return api.query(
        op,
        value,
        family=args.family,
        arguments=args.arguments,
        path=args.path,
        settings=settings,
    )


def main(argv: Optional[List[str]] = None) -> int:
    env_path = os.path.join(os.getcwd(), ".env")
    if os.path.exists(env_path):
        load_dotenv(dotenv_path=env_path, override=False)
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        result = run(args)
    except (MakeDistributionError, httpx.RequestError) as exc:
        logger.error("%s", exc)
        return 1
    print(json.dumps(result, indent=2))
    return 0
