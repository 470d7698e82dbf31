"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from ims.infrastructure.persistence.in_memory_item_repository import (
    InMemoryItemRepository,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"


def item_repository() -> InMemoryItemRepository:
    """Return a fresh, empty store. One per interactive session."""
    return InMemoryItemRepository()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
