"""
Unit tests for ServiceAccountTokenProvider.
"""

import json
import time
import pytest
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

from src.errors import CredentialsError
from src.utils.credentials import ServiceAccountTokenProvider


def test_missing_json_raises():
    provider = ServiceAccountTokenProvider("", scopes=["scope"])

    with pytest.raises(CredentialsError):
        provider()


def test_invalid_json_raises():
    provider = ServiceAccountTokenProvider("{not json", scopes=["scope"])

    with pytest.raises(CredentialsError):
        provider()


def test_token_refreshed_once_while_valid():
    credentials = MagicMock()
    credentials.valid = False
    credentials.token = "fresh-token"

    def refresh(request):
        credentials.valid = True

    credentials.refresh.side_effect = refresh

    with patch("src.utils.credentials.service_account") as mock_sa:
        mock_sa.Credentials.from_service_account_info.return_value = credentials
        provider = ServiceAccountTokenProvider(
            json.dumps({"client_email": "bot@example.iam.gserviceaccount.com"}),
            scopes=["scope-a"]
        )

        assert provider() == "fresh-token"
        assert provider() == "fresh-token"

        mock_sa.Credentials.from_service_account_info.assert_called_once()
        _, kwargs = mock_sa.Credentials.from_service_account_info.call_args
        assert kwargs["scopes"] == ["scope-a"]
        assert credentials.refresh.call_count == 1


def test_incomplete_info_raises():
    with patch("src.utils.credentials.service_account") as mock_sa:
        mock_sa.Credentials.from_service_account_info.side_effect = ValueError("missing fields")
        provider = ServiceAccountTokenProvider(json.dumps({}), scopes=["scope"])

        with pytest.raises(CredentialsError):
            provider()


def test_concurrent_calls_load_once():
    credentials = MagicMock()
    credentials.valid = False
    credentials.token = "shared-token"

    def slow_refresh(request):
        time.sleep(0.05)
        credentials.valid = True

    credentials.refresh.side_effect = slow_refresh

    with patch("src.utils.credentials.service_account") as mock_sa:
        mock_sa.Credentials.from_service_account_info.return_value = credentials
        provider = ServiceAccountTokenProvider(json.dumps({}), scopes=["scope"])

        with ThreadPoolExecutor(max_workers=4) as pool:
            tokens = list(pool.map(lambda _: provider(), range(4)))

    assert tokens == ["shared-token"] * 4
    mock_sa.Credentials.from_service_account_info.assert_called_once()
    assert credentials.refresh.call_count == 1
