"""Pytest configuration and fixtures for ah tests."""

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import boto3
import pytest
import yaml
from moto import mock_aws

from ah.core.config import ProviderConfig


@pytest.fixture(autouse=True)
def isolated_ah_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point AH_CONFIG at a missing file and clear AH_DEBUG.

    Keeps an ``ah.yaml`` in the developer's working directory from leaking
    into unit tests.
    """
    monkeypatch.setenv("AH_CONFIG", str(tmp_path / "missing-ah.yaml"))
    monkeypatch.delenv("AH_DEBUG", raising=False)


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers replaced by ``configure_logging``."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level

    yield

    for handler in root.handlers[:]:
        if handler not in original_handlers:
            root.removeHandler(handler)
    for handler in original_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(original_level)


@pytest.fixture
def aws_credentials() -> Generator[None, None, None]:
    """Fixture to set AWS credentials for testing with proper cleanup.

    Sets mock AWS credentials in environment variables for the duration of the test,
    then restores the original environment state.

    Yields
    ------
    None
        Control back to test after setting credentials
    """
    names = ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_DEFAULT_REGION")
    old_values = {name: os.environ.get(name) for name in names}

    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"

    yield

    for name, value in old_values.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def mocked_aws(aws_credentials) -> Generator[None, None, None]:
    """Mock all AWS interactions."""
    with mock_aws():
        yield


@pytest.fixture
def ec2_client(mocked_aws) -> Any:
    """Plain boto3 EC2 client against the moto backend."""
    return boto3.client("ec2", region_name="us-east-1")


@pytest.fixture
def registered_ami(ec2_client) -> str:
    """Register an AMI for testing.

    Returns
    -------
    str
        AMI ID of registered image
    """
    response = ec2_client.register_image(
        Name="test-ami-image",
        Description="Test AMI",
        Architecture="x86_64",
        RootDeviceName="/dev/sda1",
        VirtualizationType="hvm",
    )
    return response["ImageId"]


@pytest.fixture
def launch_instance(ec2_client, registered_ami) -> Callable[..., str]:
    """Return a helper launching one moto instance, optionally Name-tagged.

    Returns
    -------
    Callable[..., str]
        ``launch(name=None, instance_type="t3.micro")`` returning the instance ID
    """

    def _launch(name: str | None = None, instance_type: str = "t3.micro") -> str:
        kwargs: dict[str, Any] = {}
        if name is not None:
            kwargs["TagSpecifications"] = [
                {"ResourceType": "instance", "Tags": [{"Key": "Name", "Value": name}]}
            ]

        response = ec2_client.run_instances(
            ImageId=registered_ami,
            InstanceType=instance_type,
            MinCount=1,
            MaxCount=1,
            **kwargs,
        )
        return response["Instances"][0]["InstanceId"]

    return _launch


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(region="us-east-1")


@pytest.fixture
def config_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Create a temporary config file path and point AH_CONFIG at it."""
    config_path = tmp_path / "ah.yaml"
    monkeypatch.setenv("AH_CONFIG", str(config_path))
    return config_path


@pytest.fixture
def write_config(config_file: Path) -> Callable[[dict[str, Any]], None]:
    """Helper fixture to write config data to file.

    Returns
    -------
    callable
        Function that takes config_data dict and writes to file
    """

    def _write(config_data: dict[str, Any]) -> None:
        with open(config_file, "w") as f:
            yaml.dump(config_data, f)

    return _write
