"""
Dashboard contracts.

Shapes returned by the /api/v1/dashboard/* endpoints. The backend owns these
numbers; the client only decodes them. Extra keys sent by the backend are kept
so a decoded model dumps back to the body it came from.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class AuditStatus(str, Enum):
    COMPLIANT = "COMPLIANT"
    NON_COMPLIANT = "NON-COMPLIANT"


def is_compliant(status: str) -> bool:
    """Only an exact "COMPLIANT" counts; any other backend status is treated as not compliant."""
    return status == AuditStatus.COMPLIANT.value


class DashboardSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    timestamp: str
    total_models_audited: int
    compliant_models: int
    non_compliant_models: int
    compliance_rate: float
    top_bias_source: str
    most_risky_model: str
    audit_status: str                    # "COMPLIANT" / "NON-COMPLIANT", or "offline" for fallbacks
    risk_score: float
    last_audit: str
    pending_actions: int
    trend: str


class ModelRiskEntry(BaseModel):
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    model_name: str
    version: str
    status: str                          # see is_compliant
    risk_score: float
    bias_source: str
    disparate_impact: float
    last_audited: str


class ComplianceTrendPoint(BaseModel):
    model_config = ConfigDict(extra="allow")

    week: str
    compliant_models: int


class DashboardOverview(BaseModel):
    """Summary and model-risk breakdown fetched together for the dashboard page."""

    model_config = ConfigDict(protected_namespaces=())

    summary: DashboardSummary
    model_risk: List[ModelRiskEntry]
    offline: bool = False
    message: str = ""
