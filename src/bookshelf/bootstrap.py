# ABOUTME: Builds the production BookGateway at the application boundary.
# ABOUTME: Chooses the local or remote endpoint through an injectable host-selection predicate.

import logging
import socket
from collections.abc import Callable
from pathlib import Path

from bookshelf.config import DatabaseConfig, load_config
from bookshelf.db.gateway import BookGateway

logger = logging.getLogger(__name__)

# Zero-argument predicate answering "are we on the machine that hosts the local database?"
HostPredicate = Callable[[], bool]


def local_ip_address() -> str:
    """Return this machine's address as resolved from its hostname."""
    return socket.gethostbyname(socket.gethostname())


def address_matcher(
    address: str | None, resolver: Callable[[], str] = local_ip_address
) -> HostPredicate:
    """Build a predicate that is true when this machine resolves to ``address``.

    With no address configured the predicate is always false.
    """

    def is_local() -> bool:
        if not address:
            return False
        try:
            return resolver() == address
        except OSError as exc:
            logger.warning("Could not resolve local address: %s", exc)
            return False

    return is_local


def select_endpoint(config: DatabaseConfig, is_local: HostPredicate) -> str:
    """Pick the local endpoint when ``is_local()`` holds, otherwise the remote one."""
    if is_local():
        return config.local_url
    return config.remote_url


def open_default_gateway(
    config: DatabaseConfig | None = None,
    is_local: HostPredicate | None = None,
) -> BookGateway:
    """Open the production gateway described by the user's configuration.

    Args:
        config: Database settings. Loaded from the default config file if omitted.
        is_local: Host-selection policy. Defaults to matching ``config.local_address``.

    Raises:
        ConfigError: If no config is given and the config file cannot be loaded.
        ConnectivityError: If the selected database cannot be opened.
    """
    config = config or load_config()
    policy = is_local or address_matcher(config.local_address)
    endpoint = select_endpoint(config, policy)
    logger.debug("Opening catalog at %s", endpoint)
    return BookGateway(Path(endpoint).expanduser())
