"""
Base class for upstream source adapters.

Each public fetch method returns an UpstreamResult: any failure inside
the call is caught here and converted to Err.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional, Tuple

import requests

from src.errors import UpstreamFailure
from src.models.upstream import Err, Ok, UpstreamResult

logger = logging.getLogger(__name__)


class UpstreamSource:
    """
    Shared HTTP plumbing for the Google REST APIs.
    """

    source_name = "upstream"

    def __init__(
        self,
        token_provider: Callable[[], str],
        base_url: str,
        timeout_seconds: float = 15,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize source.

        Args:
            token_provider: Callable returning a bearer token
            base_url: API root URL
            timeout_seconds: Per-request timeout
            session: Optional requests session (a new one is created if omitted)
        """
        self.token_provider = token_provider
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token_provider()}"
        }

    def _check(self, response: requests.Response) -> Dict:
        if response.status_code != 200:
            reason = f"HTTP {response.status_code}"
            try:
                message = response.json().get("error", {}).get("message")
                if message:
                    reason = f"{reason}: {message}"
            except ValueError:
                pass
            raise UpstreamFailure(self.source_name, reason)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamFailure(self.source_name, f"Invalid JSON response: {e}") from e

    def _get_json(self, path: str, params: Optional[Dict] = None) -> Dict:
        response = self.session.get(
            f"{self.base_url}/{path}",
            headers=self._headers(),
            params=params,
            timeout=self.timeout_seconds
        )
        return self._check(response)

    def _post_json(self, path: str, body: Dict) -> Dict:
        response = self.session.post(
            f"{self.base_url}/{path}",
            headers=self._headers(),
            json=body,
            timeout=self.timeout_seconds
        )
        return self._check(response)

    def _guarded(self, fetch: Callable[..., Tuple[Any, Any]], *args) -> UpstreamResult:
        """
        Run one fetch attempt and wrap its outcome.

        Args:
            fetch: Callable returning (parsed value, raw payload)

        Returns:
            Ok(value, raw=payload) or Err(reason)
        """
        started = time.monotonic()
        try:
            value, raw = fetch(*args)
        except Exception as e:
            elapsed_ms = int((time.monotonic() - started) * 1000)
            reason = e.reason if isinstance(e, UpstreamFailure) else f"{type(e).__name__}: {e}"
            logger.error(
                f"{self.source_name} fetch failed: {reason}",
                extra={"source": self.source_name, "outcome": "error", "elapsed_ms": elapsed_ms}
            )
            return Err(reason=reason, source=self.source_name)

        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.info(
            f"{self.source_name} fetch succeeded in {elapsed_ms}ms",
            extra={"source": self.source_name, "outcome": "ok", "elapsed_ms": elapsed_ms}
        )
        return Ok(value, raw=raw)
