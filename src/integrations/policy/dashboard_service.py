"""
Dashboard Service

Loads what the dashboard page shows:
- summary and model-risk breakdown, fetched concurrently and combined only when
  both succeed
- compliance trend
- an offline overview when the caller opts into fallback data
"""

import asyncio
import logging
from typing import List, Optional

from src.fallback_handler import DashboardFallbackHandler
from src.integrations.clients.real_http.audit_api import AuditApiClient
from src.integrations.contracts.dashboard import ComplianceTrendPoint, DashboardOverview
from src.integrations.contracts.envelope import ApiError

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, api: AuditApiClient, fallback_handler: Optional[DashboardFallbackHandler] = None):
        self.api = api
        self.fallback_handler = fallback_handler or DashboardFallbackHandler()

    async def load_overview(self) -> DashboardOverview:
        """
        Fetch summary and model risk together.

        Both calls always run to completion. If either fails the whole
        overview fails with that call's ApiError; there is no partial result.
        """
        summary, model_risk = await asyncio.gather(
            self.api.get_summary(),
            self.api.get_model_risk(),
            return_exceptions=True,
        )
        for outcome in (summary, model_risk):
            if isinstance(outcome, BaseException):
                logger.error("Dashboard overview failed: %s", outcome)
                raise outcome
        return DashboardOverview(summary=summary, model_risk=model_risk)

    async def load_overview_or_fallback(self) -> DashboardOverview:
        try:
            return await self.load_overview()
        except ApiError as e:
            return self.fallback_handler.generate_fallback(e)

    async def load_compliance_trend(self) -> List[ComplianceTrendPoint]:
        return await self.api.get_compliance_trend()
