import pytest

from ah.core.config import ProviderConfig
from ah.providers.aws.session import create_ec2_client
from ah.providers.exceptions import ProviderConfigurationError
from tests.fakes import FakeEC2Client


@pytest.fixture
def empty_aws_config(monkeypatch, tmp_path):
    """Hide the developer's ~/.aws files and region variables."""
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("AWS_PROFILE", raising=False)


def test_injected_factory_receives_region_and_endpoint():
    fake = FakeEC2Client()
    config = ProviderConfig(region="us-west-2", endpoint_url="http://localhost:4566")

    client = create_ec2_client(config, fake.factory)

    assert client is fake
    assert fake.calls == [
        (
            "client",
            {
                "service_name": "ec2",
                "region_name": "us-west-2",
                "endpoint_url": "http://localhost:4566",
            },
        )
    ]


def test_explicit_region(empty_aws_config):
    client = create_ec2_client(ProviderConfig(region="ca-central-1"))

    assert client.meta.region_name == "ca-central-1"


def test_region_from_environment(empty_aws_config, monkeypatch):
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-north-1")

    client = create_ec2_client(ProviderConfig())

    assert client.meta.region_name == "eu-north-1"


def test_no_region_is_configuration_error(empty_aws_config):
    with pytest.raises(ProviderConfigurationError):
        create_ec2_client(ProviderConfig())


def test_unknown_profile_is_configuration_error(empty_aws_config):
    with pytest.raises(ProviderConfigurationError):
        create_ec2_client(ProviderConfig(region="us-east-1", profile="ah-missing-profile"))
