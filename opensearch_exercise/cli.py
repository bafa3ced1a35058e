"""Command line entry point."""

import logging
from typing import Optional, Tuple
import click
from .client import OpenSearchClient
from .config import load_config
from .exceptions import OpenSearchAuthError, OpenSearchConfigError, OpenSearchConnectionError
from .runner import Exercise


@click.command()
@click.option("--endpoint", "endpoints", multiple=True,
              help="Cluster endpoint URL. Repeat for several nodes.")
@click.option("--username", default=None, help="Admin username.")
@click.option("--verify-certs/--no-verify-certs", default=None,
              help="Verify the cluster's TLS certificate.")
@click.option("--timeout", type=int, default=None, help="Request timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, help="Log each request to stderr.")
@click.pass_context
def main(
        ctx: click.Context,
        endpoints: Tuple[str, ...],
        username: Optional[str],
        verify_certs: Optional[bool],
        timeout: Optional[int],
        verbose: bool
):
    """Run the index and document lifecycle exercise against OpenSearch.

    The admin password is read from OPENSEARCH_INITIAL_ADMIN_PASSWORD.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        config = load_config(
            endpoints=endpoints or None,
            username=username,
            verify_certs=verify_certs,
            timeout=timeout
        )
    except (OpenSearchConfigError, OpenSearchAuthError) as e:
        click.echo(str(e))
        ctx.exit(1)

    try:
        client = OpenSearchClient(config)
    except OpenSearchConnectionError as e:
        click.echo(f"cannot initialize: {e}")
        ctx.exit(1)

    click.echo("client created")
    try:
        Exercise(client).run()
    finally:
        client.close()


if __name__ == "__main__":
    main()
