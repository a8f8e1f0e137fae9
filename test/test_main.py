import os
import unittest
from unittest.mock import patch

import main


class LauncherTests(unittest.TestCase):
    def test_run_passes_settings_to_uvicorn(self) -> None:
        env = {
            "HOST": "0.0.0.0",
            "PORT": "9000",
            "RELOAD": "no",
            "LOG_LEVEL": "DEBUG",
            "ORM": "SQLAlchemy",
            "API_PREFIX": "/api",
        }
        with patch.dict(os.environ, env), patch("main.load_dotenv"), patch(
            "main.uvicorn.run"
        ) as uvicorn_run:
            main.run()

        uvicorn_run.assert_called_once_with(
            "backend_fastapi.main:app",
            host="0.0.0.0",
            port=9000,
            reload=False,
            log_level="debug",
        )

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch("main.load_dotenv"):
            settings = main._settings()

        self.assertEqual(
            settings,
            {
                "host": "127.0.0.1",
                "port": 8000,
                "reload": True,
                "log_level": "info",
                "orm": "peewee",
            },
        )

    def test_unknown_orm_is_rejected(self) -> None:
        with patch.dict(os.environ, {"ORM": "mongo"}), patch("main.load_dotenv"), patch(
            "main.uvicorn.run"
        ) as uvicorn_run:
            with self.assertRaises(SystemExit) as ctx:
                main.run()

        self.assertIn("mongo", str(ctx.exception))
        uvicorn_run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
