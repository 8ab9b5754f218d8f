"""
Analysis contracts.

Results of the bias-detection and explainability uploads. Metric values, SHAP
values and recommendations are computed remotely and passed through as-is.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class BiasMetrics(BaseModel):
    model_config = ConfigDict(extra="allow")

    disparate_impact: float
    statistical_parity_difference: float
    equal_opportunity_difference: float
    average_odds_difference: float


class BiasDetectionResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    metrics: BiasMetrics
    audit_status: str
    recommendations: List[str]
    record_count: int


class FeatureImportance(BaseModel):
    model_config = ConfigDict(extra="allow")

    feature: str
    importance: float
    direction: str


class ExplainabilityResult(BaseModel):
    model_config = ConfigDict(extra="allow", protected_namespaces=())

    model_name: str
    model_version: str
    instance_index: int
    shap_values: Dict[str, float]
    feature_importance: List[FeatureImportance]
    natural_language_explanation: str
    role: str
    recommendations: List[str]
