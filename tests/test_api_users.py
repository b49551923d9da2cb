"""API tests for admin-only user management."""

import unittest

from tests.api_support import API, ApiTestCase, auth


class TestUserManagementAccess(ApiTestCase):
    def test_regular_user_forbidden(self) -> None:
        token, user = self.register("alice")
        for method, path in (
            ("get", "/users"),
            ("get", f"/users/{user['id']}"),
            ("put", f"/users/{user['id']}"),
            ("delete", f"/users/{user['id']}"),
        ):
            kwargs = {"json": {}} if method == "put" else {}
            resp = getattr(self.client, method)(f"{API}{path}", headers=auth(token), **kwargs)
            self.assertEqual(resp.status_code, 403, f"{method} {path}")
            self.assertEqual(
                resp.json()["message"], "Access denied. Insufficient permissions."
            )

    def test_anonymous_unauthenticated(self) -> None:
        resp = self.client.get(f"{API}/users")
        self.assertEqual(resp.status_code, 401)


class TestAdminUserOperations(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin, self.admin_user = self.register("admin", role="admin")
        self.alice, self.alice_user = self.register("alice", "a@x.com")
        self.bob, self.bob_user = self.register("bob", "b@x.com")

    def _url(self, user_id: int) -> str:
        return f"{API}/users/{user_id}"

    def test_list_users(self) -> None:
        resp = self.client.get(f"{API}/users", headers=auth(self.admin))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["data"]
        self.assertEqual(data["count"], 3)
        self.assertEqual([u["username"] for u in data["users"]], ["admin", "alice", "bob"])
        self.assertTrue(all("password_hash" not in u for u in data["users"]))

    def test_get_user(self) -> None:
        resp = self.client.get(self._url(self.alice_user["id"]), headers=auth(self.admin))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["user"]["email"], "a@x.com")

    def test_get_missing_user(self) -> None:
        resp = self.client.get(self._url(9999), headers=auth(self.admin))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["message"], "User not found")

    def test_update_user(self) -> None:
        resp = self.client.put(
            self._url(self.alice_user["id"]),
            json={"username": "alice2", "role": "admin"},
            headers=auth(self.admin),
        )
        self.assertEqual(resp.status_code, 200)
        user = resp.json()["data"]["user"]
        self.assertEqual((user["username"], user["role"], user["email"]), ("alice2", "admin", "a@x.com"))

    def test_update_collision_with_other_user(self) -> None:
        resp = self.client.put(
            self._url(self.alice_user["id"]), json={"email": "b@x.com"}, headers=auth(self.admin)
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Email already taken by another user")
        self.assertEqual(
            resp.json()["errors"],
            [{"field": "email", "message": "Email already taken by another user"}],
        )
        resp = self.client.put(
            self._url(self.alice_user["id"]), json={"username": "bob"}, headers=auth(self.admin)
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Username already taken by another user")
        self.assertEqual(resp.json()["errors"][0]["field"], "username")

    def test_update_to_same_values_is_noop(self) -> None:
        resp = self.client.put(
            self._url(self.alice_user["id"]),
            json={"username": "alice", "email": "a@x.com"},
            headers=auth(self.admin),
        )
        self.assertEqual(resp.status_code, 200)

    def test_update_missing_user(self) -> None:
        resp = self.client.put(self._url(9999), json={"role": "admin"}, headers=auth(self.admin))
        self.assertEqual(resp.status_code, 404)

    def test_admin_cannot_delete_self(self) -> None:
        resp = self.client.delete(self._url(self.admin_user["id"]), headers=auth(self.admin))
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "You cannot delete your own account")
        resp = self.client.get(f"{API}/auth/profile", headers=auth(self.admin))
        self.assertEqual(resp.status_code, 200)

    def test_delete_missing_user(self) -> None:
        resp = self.client.delete(self._url(9999), headers=auth(self.admin))
        self.assertEqual(resp.status_code, 404)

    def test_delete_cascades_to_tasks(self) -> None:
        alice_tasks = [self.create_task(self.alice, title=f"a{i}") for i in range(3)]
        bob_task = self.create_task(self.bob, title="b1")

        resp = self.client.delete(self._url(self.alice_user["id"]), headers=auth(self.admin))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "User deleted successfully")

        for task in alice_tasks:
            resp = self.client.get(f"{API}/tasks/{task['id']}", headers=auth(self.admin))
            self.assertEqual(resp.status_code, 404)
        resp = self.client.get(f"{API}/tasks", headers=auth(self.admin))
        self.assertEqual([t["id"] for t in resp.json()["data"]["tasks"]], [bob_task["id"]])
        resp = self.client.get(self._url(self.alice_user["id"]), headers=auth(self.admin))
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
