"""
Credentials Supplier

Fetches secrets from Secrets Manager and converts them into credentials.
Every call re-reads the plugin configuration and re-lists the secrets.
"""

from typing import Callable, Dict, Any, List, Optional

from .client import ClientConfiguration
from .config import PluginConfiguration, Transformations
from .credentials import CredentialsFactory, StandardCredentials
from .errors import CredentialError
from .filters import FiltersFactory
from .list_secrets import ListSecretsOperation
from .loggingx import get_logger

logger = get_logger(__name__)


class CredentialsSupplier:
    """Produces the current collection of credentials on demand."""

    def __init__(self, configuration_source: Optional[Callable[[], PluginConfiguration]] = None,
                 factory: Optional[Callable[..., Optional[StandardCredentials]]] = None):
        """
        Args:
            configuration_source: Returns the configuration to use
                (defaults to the process-wide instance)
            factory: Converts (name, description, tags, client, secret_id)
                into a credential or None
        """
        self.configuration_source = configuration_source or PluginConfiguration.get_instance
        self.factory = factory or CredentialsFactory.create

    @classmethod
    def standard(cls) -> 'CredentialsSupplier':
        return cls()

    def get(self) -> List[StandardCredentials]:
        """
        Get the current credentials.

        Returns:
            Credentials with unique ids; on an id collision the entry listed
            last wins

        Raises:
            botocore.exceptions.ClientError: If listing secrets fails
            botocore.exceptions.BotoCoreError: If the service is unreachable
        """
        logger.debug("Retrieve secrets from AWS Secrets Manager")

        config = self.configuration_source()

        filters_config = config.list_secrets.filters if config.list_secrets else []
        filters = FiltersFactory.create(filters_config)

        client_config = config.client or ClientConfiguration()
        client = client_config.build()

        transformations = config.transformations or Transformations()

        supplier = SingleAccountCredentialsSupplier(client, transformations, filters, self.factory)

        credentials_by_id = {}
        for credential in supplier.get():
            credentials_by_id[credential.id] = credential

        return list(credentials_by_id.values())


class SingleAccountCredentialsSupplier:
    """Lists and converts the secrets visible to one client."""

    def __init__(self, client, transformations: Transformations,
                 filters: List[Dict[str, Any]],
                 factory: Callable[..., Optional[StandardCredentials]]):
        self.client = client
        self.transformations = transformations
        self.filters = filters
        self.factory = factory

    def get(self) -> List[StandardCredentials]:
        secret_list = ListSecretsOperation(self.client, self.filters).get()

        credentials = []
        for entry in secret_list:
            credential = self._convert(entry)
            if credential is not None:
                credentials.append(credential)

        logger.debug("Converted secrets to credentials",
                     secrets=len(secret_list),
                     credentials=len(credentials))
        return credentials

    def _convert(self, entry: Dict[str, Any]) -> Optional[StandardCredentials]:
        try:
            name = self.transformations.name.transform(entry['Name'])
            description = self.transformations.description.transform(entry.get('Description') or '')
            tags = {tag['Key']: tag.get('Value', '') for tag in entry.get('Tags') or []}
            secret_id = entry.get('ARN') or entry['Name']

            return self.factory(name, description, tags, self.client, secret_id)
        except (CredentialError, KeyError, ValueError) as e:
            logger.debug("Skipping secret that could not be converted",
                         secret=entry.get('Name'), error=str(e))
            return None
