"""
Secrets Manager Client Settings

Builds a boto3 Secrets Manager client from the plugin's client settings.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import ConfigurationError
from .loggingx import get_logger

logger = get_logger(__name__)

SERVICE_NAME = 'secretsmanager'


class AWSCredentialsProvider(ABC):
    """Base class for the AWS credentials used to reach Secrets Manager."""

    kind = "default"

    @abstractmethod
    def session(self, region: Optional[str] = None) -> boto3.session.Session:
        """Create a boto3 session carrying these credentials."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        return {self.kind: {}}


class DefaultCredentialsProvider(AWSCredentialsProvider):
    """Standard boto3 credentials chain (env vars, shared files, instance role)."""

    kind = "default"

    def session(self, region: Optional[str] = None) -> boto3.session.Session:
        return boto3.session.Session(region_name=region)


class ProfileCredentialsProvider(AWSCredentialsProvider):
    """Named profile from the shared AWS config files."""

    kind = "profile"

    def __init__(self, profile_name: str):
        if not profile_name:
            raise ConfigurationError("Profile credentials need a profileName",
                                     config_path='client.credentialsProvider.profile')
        self.profile_name = profile_name

    def session(self, region: Optional[str] = None) -> boto3.session.Session:
        return boto3.session.Session(profile_name=self.profile_name, region_name=region)

    def to_dict(self) -> Dict[str, Any]:
        return {self.kind: {'profileName': self.profile_name}}


class AssumeRoleCredentialsProvider(AWSCredentialsProvider):
    """Temporary credentials from STS AssumeRole."""

    kind = "assumeRole"

    def __init__(self, role_arn: str, role_session_name: Optional[str] = None):
        if not role_arn:
            raise ConfigurationError("Assume role credentials need a roleArn",
                                     config_path='client.credentialsProvider.assumeRole')
        self.role_arn = role_arn
        self.role_session_name = role_session_name or "jenkins-secretsmanager"

    def session(self, region: Optional[str] = None) -> boto3.session.Session:
        sts = boto3.client('sts', region_name=region)
        response = sts.assume_role(RoleArn=self.role_arn,
                                   RoleSessionName=self.role_session_name)
        credentials = response['Credentials']

        logger.debug("Assumed role for Secrets Manager access",
                     role_arn=self.role_arn,
                     role_session_name=self.role_session_name)

        return boto3.session.Session(
            aws_access_key_id=credentials['AccessKeyId'],
            aws_secret_access_key=credentials['SecretAccessKey'],
            aws_session_token=credentials['SessionToken'],
            region_name=region
        )

    def to_dict(self) -> Dict[str, Any]:
        return {self.kind: {'roleArn': self.role_arn,
                            'roleSessionName': self.role_session_name}}


def credentials_provider_from_dict(data: Optional[Dict[str, Any]]) -> AWSCredentialsProvider:
    """Build a credentials provider from {"default"|"profile"|"assumeRole": {...}}."""
    if not data:
        return DefaultCredentialsProvider()

    if not isinstance(data, dict) or len(data) != 1:
        raise ConfigurationError("credentialsProvider must have exactly one kind",
                                 config_path='client.credentialsProvider')

    kind, options = next(iter(data.items()))
    options = options or {}
    if not isinstance(options, dict):
        raise ConfigurationError(f"Options of credentials provider '{kind}' must be a mapping",
                                 config_path='client.credentialsProvider')

    if kind == 'default':
        return DefaultCredentialsProvider()
    elif kind == 'profile':
        return ProfileCredentialsProvider(options.get('profileName'))
    elif kind == 'assumeRole':
        return AssumeRoleCredentialsProvider(options.get('roleArn'),
                                             options.get('roleSessionName'))

    raise ConfigurationError(f"Unknown credentials provider: {kind}",
                             config_path='client.credentialsProvider')


class EndpointConfiguration:
    """Custom service endpoint, e.g. a VPC endpoint or a local emulator."""

    def __init__(self, service_endpoint: str, signing_region: str):
        if not service_endpoint or not signing_region:
            raise ConfigurationError(
                "Endpoint configuration needs serviceEndpoint and signingRegion",
                config_path='client.endpointConfiguration'
            )
        self.service_endpoint = service_endpoint
        self.signing_region = signing_region

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['EndpointConfiguration']:
        if not data:
            return None
        if not isinstance(data, dict):
            raise ConfigurationError("endpointConfiguration must be a mapping",
                                     config_path='client.endpointConfiguration')
        return cls(data.get('serviceEndpoint'), data.get('signingRegion'))

    def to_dict(self) -> Dict[str, Any]:
        return {'serviceEndpoint': self.service_endpoint,
                'signingRegion': self.signing_region}


class ClientConfiguration:
    """Connection settings for the Secrets Manager client."""

    def __init__(self, credentials_provider: Optional[AWSCredentialsProvider] = None,
                 endpoint_configuration: Optional[EndpointConfiguration] = None,
                 region: Optional[str] = None):
        self.credentials_provider = credentials_provider or DefaultCredentialsProvider()
        self.endpoint_configuration = endpoint_configuration
        self.region = region

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ClientConfiguration':
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError("client must be a mapping", config_path='client')

        return cls(
            credentials_provider=credentials_provider_from_dict(data.get('credentialsProvider')),
            endpoint_configuration=EndpointConfiguration.from_dict(data.get('endpointConfiguration')),
            region=data.get('region')
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {'credentialsProvider': self.credentials_provider.to_dict()}
        if self.endpoint_configuration:
            data['endpointConfiguration'] = self.endpoint_configuration.to_dict()
        if self.region:
            data['region'] = self.region
        return data

    def build(self):
        """
        Create a Secrets Manager client.

        An endpoint configuration takes precedence over the region setting;
        its signing region is used as the client region.

        Returns:
            boto3 Secrets Manager client
        """
        if self.endpoint_configuration:
            region = self.endpoint_configuration.signing_region
            endpoint_url = self.endpoint_configuration.service_endpoint
        else:
            region = self.region
            endpoint_url = None

        session = self.credentials_provider.session(region)

        logger.debug("Building Secrets Manager client",
                     region=region,
                     endpoint=endpoint_url,
                     credentials_provider=self.credentials_provider.kind)

        if endpoint_url:
            return session.client(SERVICE_NAME, region_name=region, endpoint_url=endpoint_url)
        return session.client(SERVICE_NAME, region_name=region)


class FormValidation:
    """Outcome of a configuration check, rendered as an ok/error banner."""

    OK = "ok"
    ERROR = "error"

    def __init__(self, kind: str, message: str):
        self.kind = kind
        self.message = message

    @classmethod
    def ok(cls, message: str) -> 'FormValidation':
        return cls(cls.OK, message)

    @classmethod
    def error(cls, message: str) -> 'FormValidation':
        return cls(cls.ERROR, message)

    @property
    def is_ok(self) -> bool:
        return self.kind == self.OK

    def __repr__(self):
        return f"FormValidation({self.kind!r}, {self.message!r})"


def check_connection(client_configuration: ClientConfiguration, client=None) -> FormValidation:
    """
    Check that Secrets Manager is reachable with the given settings.

    Args:
        client_configuration: Settings to check
        client: Optional pre-built client (skips build)

    Returns:
        FormValidation with "Success" or the AWS client error
    """
    try:
        if client is None:
            client = client_configuration.build()
        client.list_secrets(MaxResults=1)
    except ClientError as e:
        message = e.response.get('Error', {}).get('Message') or str(e)
        logger.warning("Secrets Manager connection test failed", error=message)
        return FormValidation.error(f"AWS client error: {message}")
    except BotoCoreError as e:
        logger.warning("Secrets Manager connection test failed", error=str(e))
        return FormValidation.error(f"AWS client error: {e}")

    logger.info("Secrets Manager connection test succeeded")
    return FormValidation.ok("Success")
