"""Shared fixtures for credentials provider tests."""

import boto3
import pytest
from botocore.stub import Stubber

from jenkins_secretsmanager.client import ClientConfiguration
from jenkins_secretsmanager.config import PluginConfiguration
from jenkins_secretsmanager.loggingx import setup_logging

REGION = "us-east-1"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    setup_logging(level="WARNING")


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch, tmp_path):
    """Keep tests away from real AWS credentials and instance metadata."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws_credentials"))
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("SECRETSMANAGER_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def reset_configuration():
    PluginConfiguration.reset_instance()
    yield
    PluginConfiguration.reset_instance()


@pytest.fixture
def secretsmanager_client():
    return boto3.client("secretsmanager", region_name=REGION)


@pytest.fixture
def stubber(secretsmanager_client):
    with Stubber(secretsmanager_client) as stub:
        yield stub


@pytest.fixture
def use_stubbed_client(monkeypatch, secretsmanager_client):
    """Make every ClientConfiguration build the stubbed client."""
    monkeypatch.setattr(ClientConfiguration, "build", lambda self: secretsmanager_client)
    return secretsmanager_client


def secret_entry(name, description=None, tags=None, arn=None):
    """Build a SecretListEntry as returned by ListSecrets."""
    entry = {
        "ARN": arn or f"arn:aws:secretsmanager:{REGION}:123456789012:secret:{name}-AbCdEf",
        "Name": name,
    }
    if description is not None:
        entry["Description"] = description
    if tags is not None:
        entry["Tags"] = [{"Key": k, "Value": v} for k, v in tags.items()]
    return entry
