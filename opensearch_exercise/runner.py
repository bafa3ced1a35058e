"""Index and document lifecycle smoke test.

Runs a fixed sequence of API calls against one cluster. Every step is
reported and a failing step never stops the ones after it.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, TextIO, Tuple
import click
from .client import OpenSearchClient
from .exceptions import OpenSearchConnectionError, OpenSearchQueryError
from .result import OperationResult
from .utils import format_json

logger = logging.getLogger(__name__)

MOVIES_INDEX = "movies"
GAMES_INDEX = "games"

MOVIE_DOCUMENTS = {
    "1": {"title": "Beauty and the Beast", "year": 1991},
    "2": {"title": "Beauty and the Beast - Live Action", "year": 2017},
}

Step = Tuple[str, Callable[[], Dict[str, Any]]]


def execute(operation: Callable[[], Dict[str, Any]]) -> OperationResult:
    """Run one API call and capture its outcome instead of raising."""
    try:
        return OperationResult.success(operation())
    except OpenSearchQueryError as e:
        logger.debug("Query failed: status=%s error=%s", e.status_code, e.error)
        return OperationResult.failure(str(e), status=e.status_code, body=e.info)
    except OpenSearchConnectionError as e:
        logger.debug("Connection failed: %s", e)
        return OperationResult.failure(str(e))


def report(title: str, result: OperationResult, out: Optional[TextIO] = None):
    """Print a step's error line (if any) followed by its JSON body."""
    if not result.ok:
        click.echo(result.error, file=out)
    click.echo(f"{title}:\n{format_json(result.body)}", file=out)


def cluster_version(client: OpenSearchClient) -> Optional[str]:
    """Version number of the cluster, or None when it cannot be read."""
    try:
        if not client.ping():
            return None
        return client.get_cluster_info()["version"]["number"]
    except (OpenSearchQueryError, OpenSearchConnectionError, KeyError, TypeError) as e:
        logger.warning("Could not read cluster version: %s", e)
        return None


class Exercise:
    """The ordered list of lifecycle steps bound to one client."""

    def __init__(self, client: OpenSearchClient, out: Optional[TextIO] = None):
        self.client = client
        self.out = out

    def steps(self) -> List[Step]:
        client = self.client
        return [
            # Fails with resource_already_exists_exception on repeat runs
            ("Create Index", lambda: client.create_index(MOVIES_INDEX)),
            ("Delete Index, Ignore Unavailable true",
             lambda: client.delete_index(GAMES_INDEX, ignore_unavailable=True)),
            ("Delete Index, Ignore Unavailable false",
             lambda: client.delete_index(GAMES_INDEX, ignore_unavailable=False)),
            ("Create Doc",
             lambda: client.create_document(MOVIES_INDEX, "1", MOVIE_DOCUMENTS["1"])),
            # Fails with version_conflict_engine_exception on repeat runs
            ("Create Doc",
             lambda: client.create_document(MOVIES_INDEX, "2", MOVIE_DOCUMENTS["2"])),
            ("Del Doc", lambda: client.delete_document(MOVIES_INDEX, "1")),
            # The not-found body here is a document result, not an {"error": ...} body
            ("Del Doc", lambda: client.delete_document(MOVIES_INDEX, "3")),
        ]

    def run(self) -> List[Tuple[str, OperationResult]]:
        """Execute every step in order and report each one.

        The client stays open; closing it is up to the caller.
        """
        results = []
        for title, operation in self.steps():
            result = execute(operation)
            report(title, result, self.out)
            results.append((title, result))

        failed = sum(1 for _, result in results if not result.ok)
        logger.info("Exercise finished: %d steps, %d failed", len(results), failed)
        return results
