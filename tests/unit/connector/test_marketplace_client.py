"""Tests for MarketplaceClient and the requests transport."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from marketplace_connector.connector.marketplace import MarketplaceClient, basic_auth_header
from marketplace_connector.connector.transport import RequestsHttpTransport
from marketplace_connector.core.config import MarketplaceConfig
from marketplace_connector.core.exceptions import TransportError
from marketplace_connector.models.connector import ConnectorConfig, Credentials, HttpResponse

from tests.fakes import FakeTransport

CONFIG = ConnectorConfig(datasetApiPath="reporting/sales/transactions/export", vendorId="42")
CREDS = Credentials(username="user", password="pass")


def test_basic_auth_header():
    assert basic_auth_header("user", "pass") == {"Authorization": "Basic dXNlcjpwYXNz"}


class TestDatasetUrl:
    def test_default_base_url(self):
        client = MarketplaceClient(FakeTransport())
        assert client.dataset_url(CONFIG) == (
            "https://marketplace.atlassian.com/rest/2/vendors/42/"
            "reporting/sales/transactions/export?accept=csv"
        )

    def test_configured_base_url(self):
        client = MarketplaceClient(FakeTransport(), MarketplaceConfig(base_url="http://localhost:8080/"))
        assert client.dataset_url(CONFIG).startswith("http://localhost:8080/rest/2/vendors/42/")


class TestFetchCsv:
    def test_returns_body_on_200(self):
        transport = FakeTransport(default=HttpResponse(status_code=200, text="a,b\n1,2\n"))
        assert MarketplaceClient(transport).fetch_csv(CONFIG, CREDS) == "a,b\n1,2\n"
        assert transport.calls[0][1] == basic_auth_header("user", "pass")

    @pytest.mark.parametrize("status", [201, 302, 400, 403, 500])
    def test_non_200_raises(self, status):
        transport = FakeTransport(default=HttpResponse(status_code=status))
        with pytest.raises(TransportError) as excinfo:
            MarketplaceClient(transport).fetch_csv(CONFIG, CREDS)
        assert excinfo.value.status_code == status

    def test_transport_failure_propagates(self):
        transport = FakeTransport()
        transport.set_response("https://", TransportError("timeout"))
        with pytest.raises(TransportError, match="timeout"):
            MarketplaceClient(transport).fetch_csv(CONFIG, CREDS)


class TestValidateCredentials:
    def test_valid_on_200(self):
        transport = FakeTransport(default=HttpResponse(status_code=200))
        assert MarketplaceClient(transport).validate_credentials("user", "pass") is True
        assert transport.calls[0][0] == "https://marketplace.atlassian.com/rest/2/vendors?forThisUser=true"

    def test_invalid_on_400(self):
        transport = FakeTransport(default=HttpResponse(status_code=400))
        assert MarketplaceClient(transport).validate_credentials("user", "bad") is False

    @pytest.mark.parametrize("username,password", [("", "p"), ("u", ""), (None, "p"), ("u", None)])
    def test_missing_values_skip_request(self, username, password):
        transport = FakeTransport(default=HttpResponse(status_code=200))
        assert MarketplaceClient(transport).validate_credentials(username, password) is False
        assert transport.calls == []

    def test_transport_failure_is_invalid(self):
        transport = FakeTransport()
        transport.set_response("https://", TransportError("dns"))
        assert MarketplaceClient(transport).validate_credentials("user", "pass") is False


class TestRequestsHttpTransport:
    def test_returns_status_and_text(self):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = MagicMock(status_code=200, text="body")

        resp = RequestsHttpTransport(timeout=5, session=session).fetch("http://x", {"A": "b"})

        assert resp == HttpResponse(status_code=200, text="body")
        session.get.assert_called_once_with("http://x", headers={"A": "b"}, timeout=5)

    def test_non_200_is_not_an_exception(self):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = MagicMock(status_code=503, text="down")
        assert RequestsHttpTransport(session=session).fetch("http://x", {}).status_code == 503

    def test_wraps_request_exception(self):
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransportError, match="refused"):
            RequestsHttpTransport(session=session).fetch("http://x", {})
