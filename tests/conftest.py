"""Pytest fixtures for the audit API client tests."""

import httpx
import pytest

from src.integrations.clients.real_http import AuditApiClient, RequestExecutor
from src.integrations.contracts.requests import UploadFile
from src.utils.config_loader import ApiClientConfig

BASE_URL = "http://backend.test"


@pytest.fixture
def api_config():
    """Short deadlines so timeout tests finish quickly."""
    return ApiClientConfig(base_url=BASE_URL, json_timeout_seconds=0.2, form_timeout_seconds=0.4)


@pytest.fixture
def make_api(api_config):
    """Build an AuditApiClient whose network is the given MockTransport handler."""

    def _make(handler, config=None):
        executor = RequestExecutor(config or api_config, transport=httpx.MockTransport(handler))
        return AuditApiClient(executor)

    return _make


@pytest.fixture
def csv_file():
    return UploadFile(filename="hiring.csv", content=b"gender,hired\nMale,1\nFemale,0\n")


@pytest.fixture
def summary_body():
    return {
        "timestamp": "2025-01-06T09:00:00Z",
        "total_models_audited": 12,
        "compliant_models": 9,
        "non_compliant_models": 3,
        "compliance_rate": 75.0,
        "top_bias_source": "gender",
        "most_risky_model": "loan_approval",
        "audit_status": "NON-COMPLIANT",
        "risk_score": 0.42,
        "last_audit": "2025-01-05",
        "pending_actions": 4,
        "trend": "improving",
    }


@pytest.fixture
def model_risk_body():
    return [
        {
            "model_name": "loan_approval",
            "version": "2.1",
            "status": "NON-COMPLIANT",
            "risk_score": 0.71,
            "bias_source": "gender",
            "disparate_impact": 0.68,
            "last_audited": "2025-01-05",
        },
        {
            "model_name": "hiring_screen",
            "version": "1.0",
            "status": "COMPLIANT",
            "risk_score": 0.12,
            "bias_source": "none",
            "disparate_impact": 0.93,
            "last_audited": "2025-01-04",
        },
    ]


@pytest.fixture
def bias_body():
    return {
        "metrics": {
            "disparate_impact": 0.74,
            "statistical_parity_difference": -0.12,
            "equal_opportunity_difference": -0.08,
            "average_odds_difference": -0.05,
        },
        "audit_status": "NON-COMPLIANT",
        "recommendations": ["Rebalance training data", "Apply reweighing"],
        "record_count": 1000,
    }


@pytest.fixture
def explain_body():
    return {
        "model_name": "m1",
        "model_version": "1.0",
        "instance_index": 3,
        "shap_values": {"age": 0.21, "gender": -0.34},
        "feature_importance": [
            {"feature": "gender", "importance": 0.34, "direction": "negative"},
            {"feature": "age", "importance": 0.21, "direction": "positive"},
        ],
        "natural_language_explanation": "Gender lowered the predicted score.",
        "role": "analyst",
        "recommendations": ["Review gender feature usage"],
    }
