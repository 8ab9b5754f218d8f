"""Fallback handling utilities.

This module provides the placeholder data the dashboard shows when the
analysis backend cannot be reached. Falling back is a caller decision; the
API client itself always surfaces the ApiError.
"""
from datetime import datetime, timezone
from typing import Dict, Any, Optional

import logging
from src.integrations.contracts.dashboard import DashboardOverview, DashboardSummary
from src.integrations.contracts.envelope import ApiError

logger = logging.getLogger(__name__)

OFFLINE_MESSAGE = "Backend API not available - showing offline mode"


class DashboardFallbackHandler:
    """Generates the offline dashboard overview and logs triggers for telemetry."""

    def __init__(self, offline_message: str = OFFLINE_MESSAGE):
        self.offline_message = offline_message

    def generate_fallback(
        self,
        error: Optional[BaseException] = None,
        page_state: Optional[Dict[str, Any]] = None,
    ) -> DashboardOverview:
        message = error.message if isinstance(error, ApiError) else self.offline_message
        logger.info("Generating offline dashboard: reason=%s", message)

        overview = DashboardOverview(
            summary=self.offline_summary(),
            model_risk=[],
            offline=True,
            message=message,
        )

        if page_state is not None:
            page_state.setdefault("fallbacks", []).append({"message": message, "offline": True})

        return overview

    @staticmethod
    def offline_summary() -> DashboardSummary:
        return DashboardSummary(
            timestamp=datetime.now(timezone.utc).isoformat(),
            total_models_audited=0,
            compliant_models=0,
            non_compliant_models=0,
            compliance_rate=0,
            top_bias_source="N/A",
            most_risky_model="N/A",
            audit_status="offline",
            risk_score=0,
            last_audit="N/A",
            pending_actions=0,
            trend="unknown",
        )
