import unittest

from breeders.config import Settings
from breeders.db import InMemoryBreedStore, SqlBreedStore
from breeders.dependencies import build_breed_store, build_remote_adapter
from breeders.remote import InMemoryBreedAdapter, JsonBreedAdapter, XmlBreedAdapter

SERVICE_URL = "http://breeds.test/api/cat-breeds"


def _settings(**overrides) -> Settings:
    values = {
        "database_url": None,
        "use_in_memory_backends": False,
        "cat_service_url": SERVICE_URL,
        "cat_service_format": "json",
        "remote_timeout_seconds": 2.5,
    }
    values.update(overrides)
    return Settings(**values)


class BuildRemoteAdapterTests(unittest.TestCase):
    def test_json_format(self):
        adapter = build_remote_adapter(_settings(cat_service_format="json"))
        self.assertIsInstance(adapter, JsonBreedAdapter)
        self.assertEqual(adapter.base_url, SERVICE_URL)
        self.assertEqual(adapter.timeout, 2.5)

    def test_xml_format(self):
        adapter = build_remote_adapter(_settings(cat_service_format="xml"))
        self.assertIsInstance(adapter, XmlBreedAdapter)
        self.assertEqual(adapter.base_url, SERVICE_URL)

    def test_memory_format(self):
        adapter = build_remote_adapter(_settings(cat_service_format="memory"))
        self.assertIsInstance(adapter, InMemoryBreedAdapter)

    def test_in_memory_toggle_wins_over_format(self):
        adapter = build_remote_adapter(
            _settings(cat_service_format="xml", use_in_memory_backends=True)
        )
        self.assertIsInstance(adapter, InMemoryBreedAdapter)


class BuildBreedStoreTests(unittest.TestCase):
    def test_no_database_url_uses_memory(self):
        self.assertIsInstance(build_breed_store(_settings()), InMemoryBreedStore)

    def test_database_url_uses_sql(self):
        store = build_breed_store(_settings(database_url="sqlite+pysqlite:///:memory:"))
        self.assertIsInstance(store, SqlBreedStore)

    def test_in_memory_toggle_wins_over_database_url(self):
        store = build_breed_store(
            _settings(
                database_url="sqlite+pysqlite:///:memory:",
                use_in_memory_backends=True,
            )
        )
        self.assertIsInstance(store, InMemoryBreedStore)


if __name__ == "__main__":
    unittest.main()
