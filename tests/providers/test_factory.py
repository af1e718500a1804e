import pytest

from contentform.core.contracts.config import ContentformConfig
from contentform.core.contracts.exceptions import ConfigError
from contentform.core.providers.contentful.client import HttpContentfulClient
from contentform.core.providers.dry_run import DryRunContentfulClient
from contentform.core.providers.factory import create_client


def test_create_client_for_dry_run() -> None:
    client = create_client(ContentformConfig(dry_run=True))

    assert isinstance(client, DryRunContentfulClient)


def test_create_client_for_http_with_configured_token() -> None:
    client = create_client(ContentformConfig(token="cfpat-test"))

    assert isinstance(client, HttpContentfulClient)


def test_create_client_reads_token_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CF_TOKEN", "cfpat-env")

    client = create_client(ContentformConfig(token_env="CF_TOKEN"))

    assert isinstance(client, HttpContentfulClient)


def test_create_client_without_token_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CONTENTFUL_MANAGEMENT_TOKEN", raising=False)

    with pytest.raises(ConfigError, match="no management token"):
        create_client(ContentformConfig())
