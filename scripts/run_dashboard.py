#!/usr/bin/env python3
"""
Fetch the dashboard data from the analysis backend and print it as JSON.

Usage:
  python scripts/run_dashboard.py
  python scripts/run_dashboard.py --trend --fallback

Uses API_BASE_URL (or config/api_config.yml) for the backend address.
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
from src.integrations.contracts.envelope import ApiError
from src.integrations.policy.dashboard_service import DashboardService
from src.utils.config_loader import get_api_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def as_json(result):
    return result.model_dump(mode="json") if isinstance(result, BaseModel) else result


async def run(args: argparse.Namespace) -> dict:
    service = DashboardService(AuditApiClient(RequestExecutor(get_api_config())))
    if args.fallback:
        overview = await service.load_overview_or_fallback()
    else:
        overview = await service.load_overview()
    out = overview.model_dump(mode="json")
    if args.trend:
        trend = await service.load_compliance_trend()
        out["compliance_trend"] = [as_json(point) for point in trend]
    return out


def main() -> int:
    parser = argparse.ArgumentParser(description="Print dashboard summary and model risk")
    parser.add_argument("--trend", action="store_true", help="Also fetch the compliance trend")
    parser.add_argument("--fallback", action="store_true", help="Show offline placeholder data if the backend fails")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        out = asyncio.run(run(args))
    except ApiError as e:
        print(f"Error ({e.status}): {e.message}", file=sys.stderr)
        return 1
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
