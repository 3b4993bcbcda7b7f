from muaythai.services import trainer_selection
from tests.helpers import AppTestCase


class TrainerSelectionTest(AppTestCase):

    def setUp(self):
        super().setUp()
        self.krabi = self.make_province("Krabi", "กระบี่")
        self.gym = self.make_gym()
        self.anan = self.make_trainer(first_name_en="Anan", first_name_th="อนันต์", exp_year=5, province_id=self.krabi.id)
        self.boon = self.make_trainer(first_name_en="Boon", first_name_th="บุญ", exp_year=20)
        self.chai = self.make_trainer(first_name_en="Chai", first_name_th="ชัย")
        # never offered
        self.make_trainer(first_name_en="Free", is_freelance=True)
        self.make_trainer(first_name_en="Hired", gym_id=self.gym.id)
        self.make_trainer(first_name_en="Retired", is_active=False)

    def names(self, page):
        return [row["first_name_en"] for row in page["items"]]

    def test_only_unassigned_staff_trainers(self):
        page = trainer_selection.get_available_trainers_for_selection()
        self.assertEqual(page["total"], 3)
        self.assertEqual(set(self.names(page)), {"Anan", "Boon", "Chai"})

    def test_sort_by_experience_puts_unknown_last(self):
        page = trainer_selection.get_available_trainers_for_selection(sort_by="experience")
        self.assertEqual(self.names(page), ["Boon", "Anan", "Chai"])

    def test_sort_by_recent(self):
        page = trainer_selection.get_available_trainers_for_selection(sort_by="recent")
        self.assertEqual(self.names(page), ["Chai", "Boon", "Anan"])

    def test_search_by_thai_province_name(self):
        page = trainer_selection.get_available_trainers_for_selection(search_term="กระบี่")
        self.assertEqual(self.names(page), ["Anan"])
        self.assertEqual(page["items"][0]["province"]["name_en"], "Krabi")

    def test_exclude_ids_and_province_filter(self):
        page = trainer_selection.get_available_trainers_for_selection(exclude_ids=[self.anan.id, self.boon.id])
        self.assertEqual(self.names(page), ["Chai"])
        page = trainer_selection.get_available_trainers_for_selection(province_id=self.krabi.id)
        self.assertEqual(self.names(page), ["Anan"])

    def test_pagination(self):
        page = trainer_selection.get_available_trainers_for_selection(page=2, page_size=2, sort_by="recent")
        self.assertEqual(page["total"], 3)
        self.assertEqual(page["totalPages"], 2)
        self.assertEqual(self.names(page), ["Anan"])

    def test_gym_trainers(self):
        rows = trainer_selection.get_gym_trainers(self.gym.id)
        self.assertEqual([row["first_name_en"] for row in rows], ["Hired"])

    def test_quick_search(self):
        self.assertEqual(trainer_selection.search_trainers_for_selection("  "), [])
        rows = trainer_selection.search_trainers_for_selection("boo")
        self.assertEqual([row["first_name_en"] for row in rows], ["Boon"])
        self.assertEqual(trainer_selection.search_trainers_for_selection("free"), [])

    def test_routes(self):
        headers = self.auth_headers()
        url = f"/api/selection/trainers/available?excludeIds={self.anan.id}&sortBy=experience"
        body = self.client.get(url, headers=headers).get_json()
        self.assertEqual([row["first_name_en"] for row in body["data"]["items"]], ["Boon", "Chai"])

        bad = self.client.get("/api/selection/trainers/available?excludeIds=nope", headers=headers)
        self.assertEqual(bad.status_code, 400)
        bad_sort = self.client.get("/api/selection/trainers/available?sortBy=age", headers=headers)
        self.assertEqual(bad_sort.status_code, 400)

        search = self.client.get("/api/selection/trainers/search?q=chai&limit=5", headers=headers)
        self.assertEqual(len(search.get_json()["data"]), 1)

    def test_routes_require_auth(self):
        self.assertEqual(self.client.get("/api/selection/trainers/available").status_code, 401)
