"""
Shared context: the store handle and breed lookups every factory uses.

The context is built exactly once per ``ContextHolder``. Concurrent first
callers block on a lock until the single setup run finishes, then all of them
get the same instance. There is no reset; a second ``initialize`` call keeps
the existing context and only logs a warning.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from breeders.db import BreedStore
from breeders.remote import InMemoryBreedAdapter, RemoteBreedAdapter, RemoteBreedService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharedContext:
    store: BreedStore
    remote: RemoteBreedService


class ContextHolder:
    def __init__(self, setup: Optional[Callable[[], SharedContext]] = None):
        self._setup = setup
        self._lock = threading.Lock()
        self._instance: Optional[SharedContext] = None

    def get_instance(self) -> SharedContext:
        """Return the context, running the setup callable on first access."""
        instance = self._instance
        if instance is not None:
            return instance
        with self._lock:
            if self._instance is None:
                if self._setup is None:
                    raise RuntimeError(
                        "shared context has not been initialized and has no setup"
                    )
                logger.info("Initializing shared context")
                self._instance = self._setup()
            return self._instance

    def initialize(
        self, store: BreedStore, remote: Optional[RemoteBreedAdapter] = None
    ) -> SharedContext:
        """
        Create the context from explicit collaborators. Only the first call
        (or first ``get_instance``) has an effect.
        """
        with self._lock:
            if self._instance is not None:
                logger.warning(
                    "Shared context already initialized; ignoring new store handle"
                )
                return self._instance
            self._instance = SharedContext(
                store=store,
                remote=RemoteBreedService(remote or InMemoryBreedAdapter()),
            )
            return self._instance

    @property
    def initialized(self) -> bool:
        return self._instance is not None
