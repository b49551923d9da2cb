"""Tests for the create_user bootstrap command."""

import contextlib
import io
import unittest

from taskapi.core.database import SessionLocal, engine
from taskapi.core.security import verify_password
from taskapi.models import Base, User, UserRole
from taskapi.scripts.create_user import main


class TestCreateUserCommand(unittest.TestCase):
    def setUp(self) -> None:
        Base.metadata.create_all(bind=engine)

    def tearDown(self) -> None:
        Base.metadata.drop_all(bind=engine)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("root", "root@example.com", "Admin123", "admin")
        self.assertEqual(code, 0)
        self.assertIn("role 'admin'", out)
        db = SessionLocal()
        try:
            user = db.query(User).filter(User.username == "root").one()
            self.assertIs(user.role, UserRole.admin)
            self.assertTrue(verify_password("Admin123", user.password_hash))
        finally:
            db.close()

    def test_duplicate_rejected(self) -> None:
        self.assertEqual(self._run("root", "root@example.com", "Admin123")[0], 0)
        code, _, err = self._run("root2", "root@example.com", "Admin123")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

    def test_weak_password_rejected(self) -> None:
        code, _, err = self._run("root", "root@example.com", "admin")
        self.assertEqual(code, 1)
        self.assertIn("password", err)


if __name__ == "__main__":
    unittest.main()
