"""
Credentials utility.

Loads Google service accounts from JSON strings and mints bearer tokens.
"""

import json
import logging
import threading
from typing import List, Optional

from google.auth.transport.requests import Request
from google.oauth2 import service_account

from src.errors import CredentialsError

logger = logging.getLogger(__name__)


class ServiceAccountTokenProvider:
    """
    Callable that returns a valid OAuth access token for a service account.

    Credentials are parsed lazily on first call, so a missing secret only
    fails the source that needs it.
    """

    def __init__(self, service_account_json: str, scopes: List[str]):
        """
        Initialize token provider.

        Args:
            service_account_json: Service account key file contents
            scopes: OAuth scopes to request
        """
        self.service_account_json = service_account_json
        self.scopes = list(scopes)
        self._credentials: Optional[service_account.Credentials] = None
        self._lock = threading.Lock()

    def _load(self) -> service_account.Credentials:
        if not self.service_account_json:
            raise CredentialsError("Service account JSON is not configured")

        try:
            info = json.loads(self.service_account_json)
        except json.JSONDecodeError as e:
            raise CredentialsError(f"Service account JSON is invalid: {e}") from e

        try:
            credentials = service_account.Credentials.from_service_account_info(
                info, scopes=self.scopes
            )
        except (ValueError, KeyError) as e:
            raise CredentialsError(f"Service account info is incomplete: {e}") from e

        logger.debug(f"Loaded service account {info.get('client_email', '?')}")
        return credentials

    def __call__(self) -> str:
        # Shared by sources fetching on separate threads
        with self._lock:
            if self._credentials is None:
                self._credentials = self._load()

            if not self._credentials.valid:
                self._credentials.refresh(Request())

            return self._credentials.token
