"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from breeders.config import Settings, get_settings
from breeders.context import ContextHolder, SharedContext
from breeders.db import BreedStore, InMemoryBreedStore, SqlBreedStore
from breeders.remote import (
    InMemoryBreedAdapter,
    JsonBreedAdapter,
    RemoteBreedAdapter,
    RemoteBreedService,
    XmlBreedAdapter,
)

logger = logging.getLogger(__name__)


def build_breed_store(settings: Settings) -> BreedStore:
    if settings.use_in_memory_backends or not settings.database_url:
        logger.info("Using in-memory breed store")
        return InMemoryBreedStore()
    return SqlBreedStore(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_lifetime_seconds=settings.db_max_lifetime_seconds,
    )


def build_remote_adapter(settings: Settings) -> RemoteBreedAdapter:
    if settings.use_in_memory_backends or settings.cat_service_format == "memory":
        return InMemoryBreedAdapter()
    if settings.cat_service_format == "xml":
        return XmlBreedAdapter(
            settings.cat_service_url, timeout=settings.remote_timeout_seconds
        )
    return JsonBreedAdapter(
        settings.cat_service_url, timeout=settings.remote_timeout_seconds
    )


def _setup_context() -> SharedContext:
    settings = get_settings()
    return SharedContext(
        store=build_breed_store(settings),
        remote=RemoteBreedService(build_remote_adapter(settings)),
    )


_context_holder = ContextHolder(_setup_context)


def get_context() -> SharedContext:
    """
    Return the process-wide context so every request shares one store handle
    and connection pool.
    """
    return _context_holder.get_instance()
