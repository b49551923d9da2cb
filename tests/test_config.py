"""Unit tests for taskapi.core.config.Settings validators."""

import unittest

from pydantic import ValidationError

from taskapi.core.config import Settings


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestDatabaseUrl(unittest.TestCase):
    def test_postgres_and_sqlite_accepted(self) -> None:
        for url in (
            "postgresql+psycopg2://u:p@localhost:5432/db",
            "postgresql://u:p@db/tasks",
            "sqlite:///./taskapi.db",
            "sqlite://",
        ):
            self.assertEqual(_settings(DATABASE_URL=f"  {url} ").DATABASE_URL, url)

    def test_other_schemes_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://u:p@localhost/db")

    def test_empty_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="  ")


class TestJwtSettings(unittest.TestCase):
    def test_default_expiry_is_one_day(self) -> None:
        self.assertEqual(Settings.model_fields["JWT_EXPIRE_MINUTES"].default, 1440)

    def test_expiry_bounds(self) -> None:
        for bad in (0, 10081):
            with self.assertRaises(ValidationError):
                _settings(JWT_EXPIRE_MINUTES=bad)
        self.assertEqual(_settings(JWT_EXPIRE_MINUTES=1).JWT_EXPIRE_MINUTES, 1)

    def test_blank_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_SECRET="   ")

    def test_blank_issuer_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(JWT_ISSUER="")


class TestMiscSettings(unittest.TestCase):
    def test_log_level_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")

    def test_unknown_log_level_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=17)

    def test_api_prefix_trailing_slash_stripped(self) -> None:
        self.assertEqual(_settings(API_V1_PREFIX="/api/v2/").API_V1_PREFIX, "/api/v2")

    def test_api_prefix_must_be_absolute(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(API_V1_PREFIX="api")


if __name__ == "__main__":
    unittest.main()
