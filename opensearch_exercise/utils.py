"""Utility functions."""

import json
import re
from typing import Any, Dict, Union

DEFAULT_PORTS = {'https': 443, 'http': 80}


def parse_endpoint(endpoint: str) -> Dict[str, Union[str, int, bool]]:
    """
    Split an OpenSearch endpoint URL into connection parts.

    A bare hostname is treated as HTTPS. The port defaults to the
    scheme's standard port when the URL does not carry one.

    Args:
        endpoint: Endpoint URL (e.g., 'https://localhost:9200')

    Returns:
        Dict with 'host', 'port' and 'use_ssl' keys
    """
    endpoint = endpoint.strip()

    match = re.match(r'^(https?)://', endpoint, re.IGNORECASE)
    scheme = match.group(1).lower() if match else 'https'
    endpoint = endpoint[match.end():] if match else endpoint

    # Drop any path and trailing slash
    endpoint = endpoint.split('/', 1)[0]

    port = DEFAULT_PORTS[scheme]
    port_match = re.search(r':(\d+)$', endpoint)
    if port_match:
        port = int(port_match.group(1))
        endpoint = endpoint[:port_match.start()]

    if not endpoint:
        raise ValueError("Endpoint host is empty")

    return {'host': endpoint, 'port': port, 'use_ssl': scheme == 'https'}


def format_json(value: Any) -> str:
    """Render a response body as 2-space indented JSON."""
    return json.dumps(value, indent=2, default=str)
