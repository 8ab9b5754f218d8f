"""
Integrations layer.
This package contains all code used to communicate with the analysis backend:
- dashboard summary, model-risk and compliance-trend reads
- bias-detection and explainability uploads
- compliance report generation (PDF)

Key rule:
- Pages MUST NOT call the backend directly.
- Pages call AuditApiClient (or DashboardService), which builds requests and
  hands them to RequestExecutor, the single place where HTTP happens.
"""

from .contracts.envelope import ApiError, ApiErrorKind, ApiResponse, Failure, Success
from .contracts.requests import BodyEncoding, RequestDescriptor, UploadFile
from .contracts.dashboard import (
    AuditStatus,
    ComplianceTrendPoint,
    DashboardOverview,
    DashboardSummary,
    ModelRiskEntry,
)
from .contracts.analysis import (
    BiasDetectionResult,
    BiasMetrics,
    ExplainabilityResult,
    FeatureImportance,
)

__all__ = [
    # envelope
    "ApiError", "ApiErrorKind", "ApiResponse", "Failure", "Success",
    # requests
    "BodyEncoding", "RequestDescriptor", "UploadFile",
    # dashboard
    "AuditStatus", "ComplianceTrendPoint", "DashboardOverview",
    "DashboardSummary", "ModelRiskEntry",
    # analysis
    "BiasDetectionResult", "BiasMetrics", "ExplainabilityResult", "FeatureImportance",
]
