"""
Contracts (data models).

This folder defines the request/response shapes exchanged with the analysis
backend:
- RequestDescriptor / UploadFile: what the endpoint catalog hands the executor
- Success / Failure / ApiError: what every call resolves to
- Dashboard, bias-detection and explainability result models

Both the executor and the endpoint catalog use these contracts, so pages never
guess payload formats.
"""

from .analysis import BiasDetectionResult, BiasMetrics, ExplainabilityResult, FeatureImportance
from .dashboard import AuditStatus, ComplianceTrendPoint, DashboardOverview, DashboardSummary, ModelRiskEntry, is_compliant
from .envelope import ApiError, ApiErrorKind, ApiResponse, Failure, Success
from .requests import BodyEncoding, RequestDescriptor, UploadFile

__all__ = [
    "ApiError", "ApiErrorKind", "ApiResponse", "Failure", "Success",
    "BodyEncoding", "RequestDescriptor", "UploadFile",
    "AuditStatus", "ComplianceTrendPoint", "DashboardOverview", "DashboardSummary", "ModelRiskEntry", "is_compliant",
    "BiasDetectionResult", "BiasMetrics", "ExplainabilityResult", "FeatureImportance",
]
