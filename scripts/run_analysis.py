#!/usr/bin/env python3
"""
Upload a CSV to the analysis backend.

Commands:
  bias     bias detection metrics (printed as JSON)
  explain  SHAP explanation for one row (printed as JSON)
  report   compliance report PDF (written to --output)

Usage:
  python scripts/run_analysis.py bias data/hiring.csv --model-name m1 --model-version 1.0 \\
      --target hired --sensitive gender --privileged Male --unprivileged Female
  python scripts/run_analysis.py explain data/hiring.csv ... --instance-index 3 --role analyst
  python scripts/run_analysis.py report data/hiring.csv ... --role executive
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import BaseModel

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.integrations.clients.real_http import AuditApiClient, RequestExecutor
from src.integrations.clients.real_http.audit_api import DEFAULT_REPORT_ROLE
from src.integrations.contracts.envelope import ApiError
from src.integrations.contracts.requests import UploadFile
from src.utils.config_loader import get_api_config

logger = logging.getLogger("run_analysis")


def as_json(result):
    return result.model_dump(mode="json") if isinstance(result, BaseModel) else result


DEFAULT_REPORT_FILENAME = "Ethical_AI_Compliance_Report.pdf"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("csv", type=Path, help="Dataset to upload")
    common.add_argument("--model-name", required=True)
    common.add_argument("--model-version", required=True)
    common.add_argument("--target", required=True, help="Target variable column")
    common.add_argument("--sensitive", required=True, help="Sensitive attribute column")
    common.add_argument("-v", "--verbose", action="store_true")

    parser = argparse.ArgumentParser(description="Run an analysis against the audit backend")
    sub = parser.add_subparsers(dest="command", required=True)

    bias = sub.add_parser("bias", parents=[common], help="Detect bias")
    bias.add_argument("--privileged", required=True)
    bias.add_argument("--unprivileged", required=True)

    explain = sub.add_parser("explain", parents=[common], help="Explain one prediction")
    explain.add_argument("--instance-index", type=int, default=0)
    explain.add_argument("--role", default="analyst")

    report = sub.add_parser("report", parents=[common], help="Generate compliance report PDF")
    report.add_argument("--privileged", required=True)
    report.add_argument("--unprivileged", required=True)
    report.add_argument("--role", default=DEFAULT_REPORT_ROLE)
    report.add_argument("--output", type=Path, default=Path(DEFAULT_REPORT_FILENAME))
    return parser


async def run(args: argparse.Namespace) -> None:
    api = AuditApiClient(RequestExecutor(get_api_config()))
    upload = UploadFile.from_path(args.csv)

    if args.command == "bias":
        result = await api.detect_bias(
            upload, args.model_name, args.model_version, args.target, args.sensitive,
            args.privileged, args.unprivileged,
        )
        print(json.dumps(as_json(result), indent=2))
    elif args.command == "explain":
        result = await api.explain(
            upload, args.model_name, args.model_version, args.target, args.sensitive,
            args.instance_index, args.role,
        )
        print(json.dumps(as_json(result), indent=2))
    else:
        pdf = await api.generate_compliance_report(
            upload, args.model_name, args.model_version, args.target, args.sensitive,
            args.privileged, args.unprivileged, role=args.role,
        )
        args.output.write_bytes(pdf)
        logger.info("Wrote %d bytes to %s", len(pdf), args.output)


def main() -> int:
    args = build_parser().parse_args()
    setup_logging(args.verbose)
    if not args.csv.exists():
        print(f"File not found: {args.csv}", file=sys.stderr)
        return 2
    try:
        asyncio.run(run(args))
    except ApiError as e:
        print(f"Error ({e.status}): {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
