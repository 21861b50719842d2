"""
Breed store abstraction backed by SQL (via SQLAlchemy) and an in-memory test implementation.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from sqlalchemy import Column, Integer, String, create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from breeders.errors import BreedNotFoundError, LookupUnavailableError
from breeders.models import Breed

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 25
DEFAULT_MAX_LIFETIME_SECONDS = 300


class BreedStore(Protocol):
    """Interface for the local breed lookup."""

    def all(self) -> list[Breed]:
        ...

    def get_breed_by_name(self, name: str) -> Breed:
        ...

    def add_breed(self, breed: Breed) -> Breed:
        ...


class InMemoryBreedStore:
    """Simple list-backed store for development and tests."""

    def __init__(self, breeds: Optional[list[Breed]] = None):
        self.breeds: list[Breed] = []
        for breed in breeds or []:
            self.add_breed(breed)

    def all(self) -> list[Breed]:
        return list(self.breeds)

    def get_breed_by_name(self, name: str) -> Breed:
        for breed in self.breeds:
            if breed.breed == name:
                return breed
        raise BreedNotFoundError(name)

    def add_breed(self, breed: Breed) -> Breed:
        if not breed.id:
            breed = Breed(**{**breed.as_dict(), "id": len(self.breeds) + 1})
        self.breeds.append(breed)
        return breed

    def reset(self) -> None:
        """Clear all stored breeds (useful in tests)."""
        self.breeds.clear()


class SqlBreedStore:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (MySQL/MariaDB,
    Postgres, or SQLite for tests).

    The engine owns the connection pool: at most ``pool_size`` open connections,
    each recycled after ``max_lifetime_seconds``.
    """

    def __init__(
        self,
        database_url: str,
        *,
        pool_size: int = DEFAULT_POOL_SIZE,
        max_lifetime_seconds: int = DEFAULT_MAX_LIFETIME_SECONDS,
    ):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlBreedStore")
        engine_kwargs: dict = {
            "future": True,
            "pool_pre_ping": True,
            "pool_recycle": max_lifetime_seconds,
        }
        # SQLite uses a single-connection pool that takes no sizing arguments.
        if not database_url.startswith("sqlite"):
            engine_kwargs["pool_size"] = pool_size
            engine_kwargs["max_overflow"] = 0
        try:
            self.engine = create_engine(database_url, **engine_kwargs)
            self.Session = sessionmaker(
                bind=self.engine, class_=Session, expire_on_commit=False, future=True
            )
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            logger.exception("Could not connect to breed database")
            raise LookupUnavailableError(f"breed database unavailable: {exc}") from exc

    def _to_breed(self, row: "DogBreedRow") -> Breed:
        return Breed(
            id=row.id,
            breed=row.breed,
            weight_low_lbs=row.weight_low_lbs or 0,
            weight_high_lbs=row.weight_high_lbs or 0,
            average_weight=row.average_weight or 0,
            lifespan=row.lifespan or 0,
            details=row.details or "",
            alternate_names=row.alternate_names or "",
            geographic_origin=row.geographic_origin or "",
        )

    def all(self) -> list[Breed]:
        try:
            with self.Session() as session:
                rows = session.execute(
                    select(DogBreedRow).order_by(DogBreedRow.id.asc())
                ).scalars()
                return [self._to_breed(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.warning("Listing breeds failed: %s", exc)
            raise LookupUnavailableError(f"breed database unavailable: {exc}") from exc

    def get_breed_by_name(self, name: str) -> Breed:
        try:
            with self.Session() as session:
                stmt = (
                    select(DogBreedRow)
                    .where(DogBreedRow.breed == name)
                    .order_by(DogBreedRow.id.asc())
                    .limit(1)
                )
                row = session.execute(stmt).scalar_one_or_none()
                if not row:
                    raise BreedNotFoundError(name)
                return self._to_breed(row)
        except SQLAlchemyError as exc:
            logger.warning("Breed lookup for %r failed: %s", name, exc)
            raise LookupUnavailableError(f"breed database unavailable: {exc}") from exc

    def add_breed(self, breed: Breed) -> Breed:
        try:
            with self.Session() as session:
                row = DogBreedRow(
                    breed=breed.breed,
                    weight_low_lbs=breed.weight_low_lbs,
                    weight_high_lbs=breed.weight_high_lbs,
                    average_weight=breed.average_weight,
                    lifespan=breed.lifespan,
                    details=breed.details,
                    alternate_names=breed.alternate_names,
                    geographic_origin=breed.geographic_origin,
                )
                if breed.id:
                    row.id = breed.id
                session.add(row)
                session.commit()
                session.refresh(row)
                return self._to_breed(row)
        except SQLAlchemyError as exc:
            logger.warning("Saving breed %r failed: %s", breed.breed, exc)
            raise LookupUnavailableError(f"breed database unavailable: {exc}") from exc


Base = declarative_base()


class DogBreedRow(Base):
    __tablename__ = "dog_breeds"

    id = Column(Integer, primary_key=True, autoincrement=True)
    breed = Column(String(255), nullable=False, index=True)
    weight_low_lbs = Column(Integer, nullable=True)
    weight_high_lbs = Column(Integer, nullable=True)
    average_weight = Column(Integer, nullable=True)
    lifespan = Column(Integer, nullable=True)
    details = Column(String, nullable=True)
    alternate_names = Column(String, nullable=True)
    geographic_origin = Column(String, nullable=True)
