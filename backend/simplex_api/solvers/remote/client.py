from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from simplex_api.core.errors import BackendError, EngineUnreachable
from simplex_api.domain.schema import LPModel, RemoteSolution, RemoteSolveRequest
from simplex_api.solvers.remote.adapter import (
    GENERIC_BACKEND_ERROR,
    from_remote_response,
    model_from_example,
)

logger = logging.getLogger(__name__)


class RemoteSolverClient:
    """
    Thin HTTP client for the remote solver service.

    Endpoints (relative to base_url): GET /health, POST /solve, GET /examples.
    Failures are reported once; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        )

    def is_online(self) -> bool:
        try:
            with self._client() as c:
                r = c.get("/health")
        except httpx.HTTPError as exc:
            logger.info("remote.health.offline", extra={"reason": str(exc)})
            return False
        return r.status_code == 200

    def solve(self, request: RemoteSolveRequest) -> RemoteSolution:
        payload = self._request_json("POST", "/solve", json=request.model_dump(mode="json"))
        return from_remote_response(payload)

    def examples(self) -> Dict[str, LPModel]:
        payload = self._request_json("GET", "/examples")
        if not payload.get("success"):
            raise BackendError(payload.get("error") or GENERIC_BACKEND_ERROR)

        examples = payload.get("examples") or {}
        return {name: model_from_example(ex) for name, ex in examples.items()}

    def _request_json(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            with self._client() as c:
                r = c.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning(
                "remote.request.failed", extra={"path": path, "reason": str(exc)}
            )
            raise EngineUnreachable(
                f"Could not reach the solver service at {self.base_url}."
            ) from exc

        # Error statuses may still carry {success: false, error: ...}
        try:
            payload = r.json()
        except ValueError as exc:
            logger.warning(
                "remote.response.not_json",
                extra={"path": path, "status_code": r.status_code},
            )
            raise EngineUnreachable(
                f"The solver service answered HTTP {r.status_code} without a JSON body."
            ) from exc

        if not isinstance(payload, dict):
            raise EngineUnreachable("The solver service returned an unexpected payload.")
        if r.is_error and "success" not in payload:
            raise EngineUnreachable(f"The solver service answered HTTP {r.status_code}.")
        return payload
