"""Test package. Point the app at an in-memory SQLite database before anything imports it."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret-key"
os.environ["APP_ENV"] = "dev"
