from muaythai.errors import ConflictError, ForbiddenError, ValidationError
from muaythai.extensions import db
from muaythai.models import AdminUser
from muaythai.services import admin_users as admin_user_service
from tests.helpers import AppTestCase


class AdminUserServiceTest(AppTestCase):

    def test_create_hashes_password(self):
        user = admin_user_service.create_admin_user("New@Example.com", "password123", "staff")
        self.assertEqual(user.email, "new@example.com")
        self.assertNotEqual(user.password_hash, "password123")
        self.assertTrue(user.password_hash.startswith("$2"))
        self.assertTrue(user.check_password("password123"))

    def test_duplicate_email(self):
        self.make_admin("taken@example.com")
        with self.assertRaises(ConflictError):
            admin_user_service.create_admin_user("TAKEN@example.com", "password123")

    def test_maximum_three_users(self):
        self.make_admin("a@example.com")
        self.make_admin("b@example.com", role="staff")
        self.make_admin("c@example.com", role="staff", is_active=False)
        with self.assertRaises(ValidationError) as raised:
            admin_user_service.create_admin_user("d@example.com", "password123")
        self.assertEqual(raised.exception.message, "Maximum 3 users allowed")

    def test_cannot_delete_last_admin(self):
        admin = self.make_admin()
        staff = self.make_admin("staff@example.com", role="staff")
        with self.assertRaises(ValidationError):
            admin_user_service.delete_admin_user(admin.id)
        self.assertTrue(admin_user_service.delete_admin_user(staff.id))

    def test_can_delete_admin_when_another_remains(self):
        first = self.make_admin("one@example.com")
        self.make_admin("two@example.com")
        admin_user_service.delete_admin_user(first.id)
        self.assertEqual(admin_user_service.get_admin_count(), 1)

    def test_cannot_demote_or_deactivate_last_admin(self):
        admin = self.make_admin()
        with self.assertRaises(ValidationError):
            admin_user_service.update_admin_user(admin.id, {"role": "staff"})
        with self.assertRaises(ValidationError):
            admin_user_service.update_admin_user(admin.id, {"is_active": False})

    def test_update_email_and_password(self):
        self.make_admin("other@example.com")
        user = self.make_admin("me@example.com", role="staff")
        with self.assertRaises(ConflictError):
            admin_user_service.update_admin_user(user.id, {"email": "other@example.com"})
        updated = admin_user_service.update_admin_user(user.id, {"password": "new-password"})
        self.assertTrue(updated.check_password("new-password"))

    def test_authenticate(self):
        self.make_admin("login@example.com", "password123")
        self.assertIsNotNone(admin_user_service.authenticate_admin_user("LOGIN@example.com", "password123"))
        self.assertIsNone(admin_user_service.authenticate_admin_user("login@example.com", "wrong-pass"))
        self.assertIsNone(admin_user_service.authenticate_admin_user("nobody@example.com", "password123"))
        self.assertIsNone(admin_user_service.authenticate_admin_user("", ""))

    def test_authenticate_inactive(self):
        self.make_admin("off@example.com", "password123", role="staff", is_active=False)
        with self.assertRaises(ForbiddenError):
            admin_user_service.authenticate_admin_user("off@example.com", "password123")

    def test_counts(self):
        self.make_admin("a@example.com")
        self.make_admin("b@example.com", is_active=False)
        self.make_admin("c@example.com", role="staff")
        self.assertEqual(admin_user_service.get_admin_count(), 1)
        self.assertEqual(admin_user_service.get_total_user_count(), 3)


class AdminUserRoutesTest(AppTestCase):

    def setUp(self):
        super().setUp()
        self.admin = self.make_admin()
        self.headers = self.auth_headers(self.admin)

    def test_staff_cannot_manage_users(self):
        staff = self.make_admin("staff@example.com", role="staff")
        response = self.client.get("/api/admin-users", headers=self.auth_headers(staff))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.get_json()["error"], "Insufficient permissions")

    def test_list_never_exposes_password(self):
        body = self.client.get("/api/admin-users", headers=self.headers).get_json()
        self.assertEqual(len(body["data"]), 1)
        self.assertNotIn("password_hash", body["data"][0])

    def test_create_validation_and_conflict(self):
        short = self.client.post(
            "/api/admin-users", json={"email": "x@example.com", "password": "short"}, headers=self.headers
        )
        self.assertEqual(short.status_code, 400)
        bad_role = self.client.post(
            "/api/admin-users",
            json={"email": "x@example.com", "password": "password123", "role": "owner"},
            headers=self.headers,
        )
        self.assertEqual(bad_role.status_code, 400)
        conflict = self.client.post(
            "/api/admin-users", json={"email": "admin@example.com", "password": "password123"}, headers=self.headers
        )
        self.assertEqual(conflict.status_code, 409)

    def test_create_update_delete(self):
        created = self.client.post(
            "/api/admin-users", json={"email": "staff@example.com", "password": "password123"}, headers=self.headers
        )
        self.assertEqual(created.status_code, 201)
        user_id = created.get_json()["data"]["id"]
        self.assertEqual(created.get_json()["data"]["role"], "staff")

        updated = self.client.put(f"/api/admin-users/{user_id}", json={"role": "admin"}, headers=self.headers)
        self.assertEqual(updated.get_json()["data"]["role"], "admin")

        self.assertEqual(self.client.delete(f"/api/admin-users/{user_id}", headers=self.headers).status_code, 200)
        self.assertEqual(self.client.get(f"/api/admin-users/{user_id}", headers=self.headers).status_code, 404)

    def test_delete_last_admin_is_rejected(self):
        response = self.client.delete(f"/api/admin-users/{self.admin.id}", headers=self.headers)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Cannot delete the last admin user")

    def test_counts_route(self):
        data = self.client.get("/api/admin-users/stats/count", headers=self.headers).get_json()["data"]
        self.assertEqual(data, {"total": 1, "activeAdmins": 1, "maxUsers": 3})

    def test_deactivated_user_token_is_rejected(self):
        staff = self.make_admin("staff@example.com", role="staff")
        headers = self.auth_headers(staff)
        staff_row = AdminUser.query.filter_by(email="staff@example.com").one()
        staff_row.is_active = False
        db.session.commit()
        response = self.client.post("/api/tags", json={"name_th": "ก", "name_en": "A"}, headers=headers)
        self.assertEqual(response.status_code, 401)
