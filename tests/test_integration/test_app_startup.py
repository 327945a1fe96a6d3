import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from core.config_loader import settings
from core.database import Base


class AppStartupTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, future=True)

        # lifespan and get_db both open sessions through these module globals
        self.patchers = [
            patch("core.database.engine", self.engine),
            patch("core.database.SessionLocal", self.SessionLocal),
            patch("main.SessionLocal", self.SessionLocal),
        ]
        for p in self.patchers:
            p.start()

    def tearDown(self):
        for p in reversed(self.patchers):
            p.stop()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def _list_after_startup(self):
        with TestClient(app) as client:
            resp = client.get("/api/employees")
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def test_startup_creates_tables_and_seeds_sample_employee(self):
        data = self._list_after_startup()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["name"], "Bob Esponja")
        self.assertEqual(data[0]["email"], "bob@crustaceo.com")
        self.assertEqual(data[0]["salary"], 50000.0)
        self.assertIsNone(data[0]["yearsInCompany"])

    def test_every_startup_inserts_the_sample_again(self):
        self._list_after_startup()
        data = self._list_after_startup()
        self.assertEqual([e["name"] for e in data], ["Bob Esponja", "Bob Esponja"])

    def test_seeding_disabled(self):
        with patch.object(settings, "SEED_SAMPLE_EMPLOYEE", False):
            data = self._list_after_startup()
        self.assertEqual(data, [])

    def test_table_creation_disabled(self):
        with patch.object(settings, "CREATE_TABLES_ON_STARTUP", False), \
                patch.object(settings, "SEED_SAMPLE_EMPLOYEE", False):
            with TestClient(app):
                pass
        self.assertNotIn("employees", inspect(self.engine).get_table_names())


if __name__ == "__main__":
    unittest.main()
