"""
Real HTTP integration clients.

- request_executor: sends one request, enforces its deadline, classifies failures
- audit_api: the endpoint catalog built on top of the executor

Both return data shaped according to src/integrations/contracts/*.
"""

from .audit_api import ENDPOINTS, AuditApiClient, EndpointSpec
from .request_executor import RequestExecutor

__all__ = ["AuditApiClient", "ENDPOINTS", "EndpointSpec", "RequestExecutor"]
