import os
import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path

from sqlalchemy import create_engine, inspect


class MigrationTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if shutil.which("alembic") is None:
            raise unittest.SkipTest("alembic executable is not on PATH")
        cls.project_root = Path(__file__).resolve().parents[1]
        cls.tmpdir = tempfile.TemporaryDirectory()
        cls.db_url = f"sqlite+pysqlite:///{Path(cls.tmpdir.name) / 'migrations.db'}"
        cls._run_alembic("upgrade", "head")
        cls.engine = create_engine(cls.db_url)
        cls.inspector = inspect(cls.engine)

    @classmethod
    def tearDownClass(cls):
        if hasattr(cls, "engine"):
            cls.engine.dispose()
        if hasattr(cls, "tmpdir"):
            cls.tmpdir.cleanup()

    @classmethod
    def _run_alembic(cls, *args):
        env = os.environ.copy()
        env["DATABASE_URL"] = cls.db_url
        env["PYTHONPATH"] = str(cls.project_root)
        subprocess.run(
            ["alembic", *args],
            cwd=cls.project_root,
            env=env,
            check=True,
            capture_output=True,
            text=True,
        )

    def test_upgrade_head_creates_expected_tables(self):
        tables = set(self.inspector.get_table_names())
        self.assertTrue({"wp_users", "wp_usermeta", "field_definitions"}.issubset(tables))

    def test_users_and_usermeta_columns(self):
        user_columns = {col["name"] for col in self.inspector.get_columns("wp_users")}
        self.assertTrue(
            {"ID", "user_login", "user_nicename", "user_email", "user_url", "user_registered", "user_status", "display_name"}
            .issubset(user_columns)
        )
        meta_columns = {col["name"] for col in self.inspector.get_columns("wp_usermeta")}
        self.assertEqual(meta_columns, {"umeta_id", "user_id", "meta_key", "meta_value"})


if __name__ == "__main__":
    unittest.main()
