from unittest import IsolatedAsyncioTestCase
from unittest.mock import patch

from sqlalchemy.pool import StaticPool

from core.store import RecordStore
from main import app, lifespan
from models import make_engine


class TestStartup(IsolatedAsyncioTestCase):
    def tearDown(self):
        if hasattr(app.state, "store"):
            del app.state.store

    async def test_unreachable_database_stops_the_process(self):
        # sqlite cannot create a file inside a missing directory
        engine = make_engine("sqlite:////nonexistent-dir/for/city.db")
        with patch("main.engine", engine):
            with self.assertRaises(SystemExit) as cm:
                async with lifespan(app):
                    pass
        self.assertEqual(cm.exception.code, 1)
        self.assertFalse(hasattr(app.state, "store"))

    async def test_reachable_database_opens_the_store(self):
        engine = make_engine("sqlite://", poolclass=StaticPool)
        with patch("main.engine", engine):
            async with lifespan(app):
                self.assertIsInstance(app.state.store, RecordStore)
                self.assertTrue(app.state.store.ping())
