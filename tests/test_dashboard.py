from unittest import mock

from sqlalchemy.exc import OperationalError

from muaythai.errors import ApiError
from muaythai.extensions import db
from muaythai.services import dashboard as dashboard_service
from muaythai.services.dashboard import UNKNOWN_PROVINCE_NAME
from tests.helpers import AppTestCase


class DashboardTest(AppTestCase):

    def setUp(self):
        super().setUp()
        self.bangkok = self.make_province("Bangkok", "กรุงเทพมหานคร")
        self.phuket = self.make_province("Phuket", "ภูเก็ต")
        gym = self.make_gym(province_id=self.bangkok.id)
        self.make_gym(province_id=self.bangkok.id)
        self.make_gym(province_id=self.phuket.id, is_active=False)

        self.make_trainer(gym_id=gym.id, province_id=self.bangkok.id)
        self.make_trainer(is_freelance=True, province_id=self.phuket.id)
        self.make_trainer(is_freelance=True)
        self.make_trainer(province_id=self.bangkok.id)
        self.make_trainer(is_active=False, province_id=self.bangkok.id)

    def test_stats(self):
        stats = dashboard_service.get_dashboard_stats()
        self.assertEqual(stats["totalTrainers"], 5)
        self.assertEqual(stats["activeTrainers"], 4)
        self.assertEqual(stats["inactiveTrainers"], 1)
        self.assertEqual(stats["freelanceTrainers"], 2)
        self.assertEqual(stats["staffTrainers"], 2)
        self.assertEqual(stats["unassignedTrainers"], 1)
        self.assertEqual(stats["totalGyms"], 3)
        self.assertEqual(stats["activeGyms"], 2)
        self.assertEqual(stats["inactiveGyms"], 1)
        self.assertEqual(stats["topProvincesByGyms"], [
            {"provinceId": self.bangkok.id, "provinceName": "กรุงเทพมหานคร", "provinceNameEn": "Bangkok", "gymCount": 2},
        ])

    def test_trainer_counts_by_province(self):
        rows = dashboard_service.get_trainer_counts_by_province()
        self.assertEqual(rows[0]["provinceId"], self.bangkok.id)
        self.assertEqual(rows[0]["trainerCount"], 2)
        unknown = [row for row in rows if row["provinceId"] == 0]
        self.assertEqual(unknown[0]["provinceName"], UNKNOWN_PROVINCE_NAME)
        self.assertEqual(unknown[0]["trainerCount"], 1)
        self.assertEqual(sum(row["trainerCount"] for row in rows), 4)

    def test_routes_require_auth(self):
        self.assertEqual(self.client.get("/api/dashboard/stats").status_code, 401)
        headers = self.auth_headers()
        self.assertEqual(self.client.get("/api/dashboard/stats", headers=headers).status_code, 200)
        gyms = self.client.get("/api/dashboard/gyms-by-province", headers=headers).get_json()["data"]
        self.assertEqual(gyms[0]["gymCount"], 2)
        self.assertEqual(self.client.get("/api/dashboard/trainers-by-province", headers=headers).status_code, 200)


class EmptyDashboardTest(AppTestCase):

    def test_counts_are_zero(self):
        stats = dashboard_service.get_dashboard_stats()
        self.assertEqual(stats["totalTrainers"], 0)
        self.assertEqual(stats["unassignedTrainers"], 0)
        self.assertEqual(stats["activeGyms"], 0)
        self.assertEqual(stats["topProvincesByTrainers"], [])


class DashboardFailureTest(AppTestCase):

    def setUp(self):
        super().setUp()
        self.headers = self.auth_headers()
        self.query_error = OperationalError("SELECT count(trainers.id)", {}, Exception("connection lost"))

    def test_stats_route_reports_query_failure(self):
        with mock.patch.object(db.session, "query", side_effect=self.query_error):
            response = self.client.get("/api/dashboard/stats", headers=self.headers)
        self.assertEqual(response.status_code, 500)
        body = response.get_json()
        self.assertFalse(body["success"])
        self.assertEqual(body["error"], "Failed to fetch dashboard statistics")

    def test_counts_by_province_wrap_query_failure(self):
        with mock.patch.object(db.session, "query", side_effect=self.query_error):
            for fetch in (dashboard_service.get_trainer_counts_by_province,
                          dashboard_service.get_gym_counts_by_province):
                with self.assertRaises(ApiError) as ctx:
                    fetch()
                self.assertEqual(ctx.exception.status_code, 500)
                self.assertEqual(ctx.exception.message, "Failed to fetch dashboard statistics")
