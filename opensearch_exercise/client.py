"""Main client for OpenSearch connections."""

import logging
from typing import Any, Dict, Optional
from opensearchpy import OpenSearch, RequestsHttpConnection
from opensearchpy.exceptions import ConnectionError as TransportConnectionError
from opensearchpy.exceptions import TransportError
from .config import ConnectionConfig
from .exceptions import OpenSearchConnectionError, OpenSearchQueryError
from .utils import parse_endpoint

logger = logging.getLogger(__name__)


def _wrap_transport_error(action: str, e: TransportError) -> Exception:
    """Map an opensearch-py transport error onto our exceptions."""
    if isinstance(e, TransportConnectionError):
        return OpenSearchConnectionError(f"Failed to {action}: {str(e)}")

    status_code = e.status_code if isinstance(e.status_code, int) else None
    return OpenSearchQueryError(
        f"Failed to {action}: {str(e)}",
        status_code=status_code,
        error=e.error,
        info=e.info
    )


class OpenSearchClient:
    """Client for connecting to an OpenSearch cluster."""

    def __init__(self, config: ConnectionConfig, ca_certs: Optional[str] = None):
        """
        Initialize OpenSearch client with username/password authentication.

        Args:
            config: Endpoints, credentials, TLS and timeout settings
            ca_certs: Path to CA certificate file (optional)
        """
        self.username = config.username

        try:
            hosts = [parse_endpoint(endpoint) for endpoint in config.endpoints]
        except ValueError as e:
            raise OpenSearchConnectionError(f"Invalid endpoint: {str(e)}")

        self.hosts = hosts
        use_ssl = any(host['use_ssl'] for host in hosts)

        try:
            client_config = {
                'hosts': [{'host': host['host'], 'port': host['port']} for host in hosts],
                'http_auth': config.get_auth(),
                'use_ssl': use_ssl,
                'verify_certs': config.verify_certs,
                'connection_class': RequestsHttpConnection,
                'timeout': config.timeout
            }

            # Unverified TLS is a test-only posture; keep urllib3 quiet about it
            if not config.verify_certs:
                client_config['ssl_assert_hostname'] = False
                client_config['ssl_show_warn'] = False

            if ca_certs:
                client_config['ca_certs'] = ca_certs

            logger.debug("Connecting to %s as %s", client_config['hosts'], config.username)
            self.client = OpenSearch(**client_config)
        except Exception as e:
            raise OpenSearchConnectionError(f"Failed to initialize OpenSearch client: {str(e)}")

    def ping(self) -> bool:
        """Test connection to OpenSearch cluster."""
        try:
            return self.client.ping()
        except Exception as e:
            raise OpenSearchConnectionError(f"Failed to ping cluster: {str(e)}")

    def get_cluster_info(self) -> Dict[str, Any]:
        """Get cluster information."""
        try:
            return self.client.info()
        except TransportError as e:
            raise _wrap_transport_error("get cluster info", e)

    def create_index(self, index_name: str, body: Optional[Dict] = None) -> Dict[str, Any]:
        """Create an index."""
        logger.debug("PUT /%s", index_name)
        try:
            return self.client.indices.create(index=index_name, body=body or {})
        except TransportError as e:
            raise _wrap_transport_error("create index", e)

    def delete_index(self, index_name: str, ignore_unavailable: bool = False) -> Dict[str, Any]:
        """Delete an index; with ``ignore_unavailable`` a missing index is not an error."""
        logger.debug("DELETE /%s ignore_unavailable=%s", index_name, ignore_unavailable)
        try:
            return self.client.indices.delete(
                index=index_name,
                ignore_unavailable=ignore_unavailable
            )
        except TransportError as e:
            raise _wrap_transport_error("delete index", e)

    def create_document(self, index_name: str, doc_id: str, document: Dict) -> Dict[str, Any]:
        """Create a document under an explicit id; fails if the id is taken."""
        logger.debug("PUT /%s/_create/%s", index_name, doc_id)
        try:
            return self.client.create(index=index_name, id=doc_id, body=document)
        except TransportError as e:
            raise _wrap_transport_error("create document", e)

    def delete_document(self, index_name: str, doc_id: str) -> Dict[str, Any]:
        """Delete a document by ID."""
        logger.debug("DELETE /%s/_doc/%s", index_name, doc_id)
        try:
            return self.client.delete(index=index_name, id=doc_id)
        except TransportError as e:
            raise _wrap_transport_error("delete document", e)

    def close(self):
        """Close the client connection."""
        if hasattr(self, 'client'):
            self.client.close()
