"""
Adapters for the remote cat-breed service.

The service speaks either JSON or XML depending on how it is deployed. Each
wire format gets its own adapter; all of them hand back the same ``Breed``
value so callers never see the encoding. The active adapter is chosen once at
startup (see ``breeders.dependencies``).
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Protocol
from urllib.parse import quote

import requests

from breeders.errors import BreedNotFoundError, RemoteUnavailableError
from breeders.models import Breed

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 5  # seconds


class RemoteBreedAdapter(Protocol):
    """Translates one wire format of the breed service into ``Breed`` values."""

    def get_all_breeds(self) -> list[Breed]:
        ...

    def get_breed_by_name(self, name: str) -> Breed:
        ...


def _fetch(url: str, timeout: float, breed: str | None = None) -> requests.Response:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Breed service request to %s failed: %s", url, exc)
        raise RemoteUnavailableError(f"breed service unavailable: {exc}") from exc

    if response.status_code == 404 and breed is not None:
        raise BreedNotFoundError(breed)
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        logger.warning("Breed service returned %s for %s", response.status_code, url)
        raise RemoteUnavailableError(f"breed service error: {exc}") from exc
    return response


def _to_breed(data: Any, url: str) -> Breed:
    try:
        return Breed.from_dict(data)
    except (AttributeError, TypeError, ValueError) as exc:
        raise RemoteUnavailableError(
            f"malformed breed record from {url}: {exc}"
        ) from exc


def _pick(records: list, name: str, url: str) -> Breed:
    """Return the record whose breed name is ``name``; anything else is not found."""
    for record in records:
        breed = _to_breed(record, url)
        if breed.breed == name:
            return breed
    raise BreedNotFoundError(name)


@dataclass
class JsonBreedAdapter:
    """Breed service speaking JSON: ``{base}/all/json`` and ``{base}/{name}/json``."""

    base_url: str
    timeout: float = REQUEST_TIMEOUT

    def _url(self, segment: str) -> str:
        return f"{self.base_url.rstrip('/')}/{quote(segment, safe='')}/json"

    def get_all_breeds(self) -> list[Breed]:
        url = self._url("all")
        response = _fetch(url, self.timeout)
        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteUnavailableError(f"invalid JSON from {url}") from exc
        if not isinstance(payload, list):
            raise RemoteUnavailableError(f"expected a list of breeds from {url}")
        return [_to_breed(item, url) for item in payload]

    def get_breed_by_name(self, name: str) -> Breed:
        url = self._url(name)
        response = _fetch(url, self.timeout, breed=name)
        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteUnavailableError(f"invalid JSON from {url}") from exc
        if not payload:
            raise BreedNotFoundError(name)
        # A single record may also arrive wrapped in a list.
        records = payload if isinstance(payload, list) else [payload]
        return _pick(records, name, url)


def _element_to_dict(element: ET.Element) -> dict:
    return {child.tag: (child.text or "") for child in element}


@dataclass
class XmlBreedAdapter:
    """
    Breed service speaking XML: ``{base}/all/xml`` returns a wrapper element
    holding one element per breed; ``{base}/{name}/xml`` returns a single breed
    element. Child tag names match the JSON keys.
    """

    base_url: str
    timeout: float = REQUEST_TIMEOUT

    def _url(self, segment: str) -> str:
        return f"{self.base_url.rstrip('/')}/{quote(segment, safe='')}/xml"

    def _parse(self, response: requests.Response, url: str) -> ET.Element:
        try:
            return ET.fromstring(response.content)
        except ET.ParseError as exc:
            raise RemoteUnavailableError(f"invalid XML from {url}") from exc

    def get_all_breeds(self) -> list[Breed]:
        url = self._url("all")
        root = self._parse(_fetch(url, self.timeout), url)
        return [
            _to_breed(_element_to_dict(item), url)
            for item in root
            if item.find("breed") is not None
        ]

    def get_breed_by_name(self, name: str) -> Breed:
        url = self._url(name)
        root = self._parse(_fetch(url, self.timeout, breed=name), url)
        if root.find("breed") is not None:
            candidates = [root]
        else:
            # Some deployments wrap the single record like the list endpoint.
            candidates = [item for item in root if item.find("breed") is not None]
        return _pick([_element_to_dict(item) for item in candidates], name, url)


@dataclass
class InMemoryBreedAdapter:
    """Test double standing in for the remote service."""

    breeds: list[Breed] = field(default_factory=list)

    def get_all_breeds(self) -> list[Breed]:
        return list(self.breeds)

    def get_breed_by_name(self, name: str) -> Breed:
        for breed in self.breeds:
            if breed.breed == name:
                return breed
        raise BreedNotFoundError(name)


@dataclass
class RemoteBreedService:
    """Facade the rest of the app talks to; wraps whichever adapter is configured."""

    remote: RemoteBreedAdapter

    def get_all_breeds(self) -> list[Breed]:
        return self.remote.get_all_breeds()

    def get_breed_by_name(self, name: str) -> Breed:
        return self.remote.get_breed_by_name(name)
