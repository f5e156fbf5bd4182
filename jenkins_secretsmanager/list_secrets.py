"""
ListSecrets Operation

Collects every secret entry matching the filters, following pagination.
"""

from typing import Dict, Any, List, Optional

from .loggingx import get_logger

logger = get_logger(__name__)


class ListSecretsOperation:
    """Lists all secret entries, page by page."""

    def __init__(self, client, filters: Optional[List[Dict[str, Any]]] = None):
        """
        Args:
            client: boto3 Secrets Manager client
            filters: ListSecrets request filters ({"Key", "Values"} dicts)
        """
        self.client = client
        self.filters = list(filters or [])

    def get(self) -> List[Dict[str, Any]]:
        """
        Fetch all matching secret entries.

        Returns:
            SecretListEntry dictionaries in service order

        Raises:
            botocore.exceptions.ClientError: If a page request fails
        """
        request = {}
        if self.filters:
            request['Filters'] = self.filters

        secrets = []
        pages = 0

        paginator = self.client.get_paginator('list_secrets')
        for page in paginator.paginate(**request):
            pages += 1
            secrets.extend(page.get('SecretList', []))

        logger.debug("Listed secrets", count=len(secrets), pages=pages)
        return secrets
