"""
Analysis backend HTTP client (endpoint catalog).

Purpose:
- Declares every backend operation once: method, path, encoding, field order
  and result model
- Builds a fresh RequestDescriptor per call and hands it to the RequestExecutor
- Decodes successful JSON into the contract models; the compliance report is
  returned as raw PDF bytes

Usage:
    executor = RequestExecutor(get_api_config())
    api = AuditApiClient(executor)
    summary = await api.get_summary()

Every operation raises ApiError on failure; see contracts/envelope.py for the
error kinds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from src.integrations.clients.real_http.request_executor import RequestExecutor
from src.integrations.contracts.analysis import BiasDetectionResult, ExplainabilityResult
from src.integrations.contracts.dashboard import ComplianceTrendPoint, DashboardSummary, ModelRiskEntry
from src.integrations.contracts.envelope import Success
from src.integrations.contracts.requests import BodyEncoding, RequestDescriptor, UploadFile
from src.integrations.policy.response_wrappers import ensure_json_shape, normalize_result, normalize_result_list

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
DEFAULT_REPORT_ROLE = "executive"


@dataclass(frozen=True)
class EndpointSpec:
    method: str
    path: str
    encoding: BodyEncoding
    fields: Tuple[str, ...] = ()
    result_model: Optional[Type[BaseModel]] = None
    many: bool = False
    binary: bool = False


_ANALYSIS_FIELDS = ("file", "model_name", "model_version", "target_variable", "sensitive_attribute")

ENDPOINTS: Dict[str, EndpointSpec] = {
    "get_summary": EndpointSpec(
        "GET", f"{API_PREFIX}/dashboard/summary", BodyEncoding.JSON, result_model=DashboardSummary
    ),
    "get_model_risk": EndpointSpec(
        "GET", f"{API_PREFIX}/dashboard/model_risk", BodyEncoding.JSON, result_model=ModelRiskEntry, many=True
    ),
    "get_compliance_trend": EndpointSpec(
        "GET", f"{API_PREFIX}/dashboard/compliance_trend", BodyEncoding.JSON, result_model=ComplianceTrendPoint, many=True
    ),
    "detect_bias": EndpointSpec(
        "POST",
        f"{API_PREFIX}/bias/detect",
        BodyEncoding.MULTIPART,
        fields=_ANALYSIS_FIELDS + ("privileged_group", "unprivileged_group"),
        result_model=BiasDetectionResult,
    ),
    "explain": EndpointSpec(
        "POST",
        f"{API_PREFIX}/explain",
        BodyEncoding.MULTIPART,
        fields=_ANALYSIS_FIELDS + ("instance_index", "role"),
        result_model=ExplainabilityResult,
    ),
    "generate_compliance_report": EndpointSpec(
        "POST",
        f"{API_PREFIX}/compliance/generate",
        BodyEncoding.MULTIPART,
        fields=_ANALYSIS_FIELDS + ("privileged_group", "unprivileged_group", "role"),
        binary=True,
    ),
}


class AuditApiClient:
    def __init__(self, executor: RequestExecutor) -> None:
        self.executor = executor
        self.config = executor.config

    def build_request(self, operation: str, **values: Any) -> RequestDescriptor:
        """
        Build the descriptor for ``operation``.

        Fields are emitted in the endpoint's declared order. The file stays an
        UploadFile (anything else raises TypeError); every other value is sent
        as its string form.
        """
        spec = ENDPOINTS[operation]
        missing = [name for name in spec.fields if name not in values]
        unexpected = [name for name in values if name not in spec.fields]
        if missing or unexpected:
            raise TypeError(f"{operation}: missing fields {missing}, unexpected fields {unexpected}")

        fields = []
        for name in spec.fields:
            value = values[name]
            if isinstance(value, UploadFile):
                fields.append((name, value))
            elif name == "file":
                raise TypeError(f"{operation}: file must be an UploadFile, got {type(value).__name__}")
            else:
                fields.append((name, str(value)))

        if spec.encoding is BodyEncoding.MULTIPART:
            deadline = self.config.form_timeout_seconds
        else:
            deadline = self.config.json_timeout_seconds
        return RequestDescriptor(
            method=spec.method,
            path=spec.path,
            encoding=spec.encoding,
            deadline_seconds=deadline,
            fields=tuple(fields),
            binary_result=spec.binary,
        )

    async def call(self, operation: str, **values: Any) -> Any:
        """Execute ``operation`` and return its decoded result, raising ApiError on failure."""
        spec = ENDPOINTS[operation]
        envelope = await self.executor.execute(self.build_request(operation, **values))
        payload = envelope.unwrap()
        if spec.binary or spec.result_model is None:
            return payload
        return self._decode(spec, envelope)

    def _decode(self, spec: EndpointSpec, envelope: Success) -> Any:
        model = spec.result_model
        if not self.config.validate_responses:
            # Unvalidated results stay plain decoded JSON.
            return ensure_json_shape(envelope.payload, many=spec.many, status=envelope.status)
        if spec.many:
            return normalize_result_list(model, envelope.payload, status=envelope.status)
        return normalize_result(model, envelope.payload, status=envelope.status)

    # -- Dashboard --

    async def get_summary(self) -> DashboardSummary:
        return await self.call("get_summary")

    async def get_model_risk(self) -> List[ModelRiskEntry]:
        return await self.call("get_model_risk")

    async def get_compliance_trend(self) -> List[ComplianceTrendPoint]:
        return await self.call("get_compliance_trend")

    # -- Analysis uploads --

    async def detect_bias(
        self,
        file: UploadFile,
        model_name: str,
        model_version: str,
        target_variable: str,
        sensitive_attribute: str,
        privileged_group: str,
        unprivileged_group: str,
    ) -> BiasDetectionResult:
        logger.info("Submitting bias detection for %s v%s", model_name, model_version)
        return await self.call(
            "detect_bias",
            file=file,
            model_name=model_name,
            model_version=model_version,
            target_variable=target_variable,
            sensitive_attribute=sensitive_attribute,
            privileged_group=privileged_group,
            unprivileged_group=unprivileged_group,
        )

    async def explain(
        self,
        file: UploadFile,
        model_name: str,
        model_version: str,
        target_variable: str,
        sensitive_attribute: str,
        instance_index: int,
        role: str,
    ) -> ExplainabilityResult:
        logger.info("Requesting explanation for %s v%s instance %s", model_name, model_version, instance_index)
        return await self.call(
            "explain",
            file=file,
            model_name=model_name,
            model_version=model_version,
            target_variable=target_variable,
            sensitive_attribute=sensitive_attribute,
            instance_index=int(instance_index),
            role=role,
        )

    async def generate_compliance_report(
        self,
        file: UploadFile,
        model_name: str,
        model_version: str,
        target_variable: str,
        sensitive_attribute: str,
        privileged_group: str,
        unprivileged_group: str,
        role: str = DEFAULT_REPORT_ROLE,
    ) -> bytes:
        """Return the generated PDF. Error bodies are still read as JSON."""
        logger.info("Generating %s compliance report for %s v%s", role, model_name, model_version)
        return await self.call(
            "generate_compliance_report",
            file=file,
            model_name=model_name,
            model_version=model_version,
            target_variable=target_variable,
            sensitive_attribute=sensitive_attribute,
            privileged_group=privileged_group,
            unprivileged_group=unprivileged_group,
            role=role,
        )
