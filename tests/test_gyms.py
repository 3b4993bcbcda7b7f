import uuid

from muaythai.errors import NotFoundError, ValidationError
from muaythai.extensions import db
from muaythai.models import Gym, Trainer
from muaythai.services import gyms as gym_service
from tests.helpers import AppTestCase


class GymServiceTest(AppTestCase):

    def setUp(self):
        super().setUp()
        self.bangkok = self.make_province("Bangkok", "กรุงเทพมหานคร")
        self.phuket = self.make_province("Phuket", "ภูเก็ต")

    def test_list_excludes_inactive_and_orders_newest_first(self):
        old = self.make_gym(name_en="Old Gym", province_id=self.bangkok.id)
        new = self.make_gym(name_en="New Gym", province_id=self.bangkok.id)
        self.make_gym(name_en="Closed Gym", is_active=False)

        result = gym_service.get_all_gyms()

        self.assertEqual(result["total"], 2)
        self.assertEqual([g["id"] for g in result["items"]], [str(new.id), str(old.id)])
        self.assertEqual(result["totalPages"], 1)

    def test_include_inactive(self):
        self.make_gym(name_en="Open")
        self.make_gym(name_en="Closed", is_active=False)
        self.assertEqual(gym_service.get_all_gyms(include_inactive=True)["total"], 2)

    def test_search_matches_province_name(self):
        self.make_gym(name_en="Tiger Muay Thai", province_id=self.phuket.id)
        self.make_gym(name_en="Fairtex", province_id=self.bangkok.id)

        result = gym_service.get_all_gyms(search="phuket")

        self.assertEqual(result["total"], 1)
        self.assertEqual(result["items"][0]["name_en"], "Tiger Muay Thai")

    def test_search_is_case_insensitive_on_description(self):
        self.make_gym(name_en="A", description_en="Beachside TRAINING camp")
        self.make_gym(name_en="B", description_en="City gym")
        self.assertEqual(gym_service.search_gyms("training")["total"], 1)

    def test_filter_by_province_and_pagination(self):
        for i in range(5):
            self.make_gym(name_en=f"Gym {i}", province_id=self.bangkok.id)
        self.make_gym(name_en="Elsewhere", province_id=self.phuket.id)

        page = gym_service.get_all_gyms(page=2, page_size=2, province_id=self.bangkok.id)

        self.assertEqual(page["total"], 5)
        self.assertEqual(page["totalPages"], 3)
        self.assertEqual(len(page["items"]), 2)
        self.assertEqual(page["page"], 2)

    def test_get_gym_by_id_hides_inactive(self):
        gym = self.make_gym(is_active=False)
        with self.assertRaises(NotFoundError):
            gym_service.get_gym_by_id(gym.id)
        self.assertEqual(gym_service.get_gym_by_id(gym.id, include_inactive=True).id, gym.id)

    def test_create_with_tags_and_trainers(self):
        tag = self.make_tag()
        trainer = self.make_trainer()

        gym = gym_service.create_gym({
            "name_th": "ยิมใหม่",
            "name_en": "New Gym",
            "province_id": self.bangkok.id,
            "tag_ids": [tag.id],
            "trainer_ids": [trainer.id],
        })

        self.assertEqual([t.id for t in gym.tags], [tag.id])
        self.assertEqual(db.session.get(Trainer, trainer.id).gym_id, gym.id)
        details = gym.to_dict(include_details=True)
        self.assertEqual(details["associatedTrainers"][0]["id"], str(trainer.id))

    def test_create_rejects_freelance_trainer(self):
        freelancer = self.make_trainer(is_freelance=True)
        with self.assertRaises(ValidationError):
            gym_service.create_gym({"name_th": "ยิม", "trainer_ids": [freelancer.id]})

    def test_create_rejects_unknown_tag(self):
        with self.assertRaises(ValidationError):
            gym_service.create_gym({"name_th": "ยิม", "tag_ids": [999]})

    def test_update_replaces_trainers(self):
        gym = self.make_gym()
        keep = self.make_trainer(first_name_en="Keep", gym_id=gym.id)
        drop = self.make_trainer(first_name_en="Drop", gym_id=gym.id)
        join = self.make_trainer(first_name_en="Join")

        gym_service.update_gym(gym.id, {"trainer_ids": [keep.id, join.id]})

        self.assertEqual(db.session.get(Trainer, keep.id).gym_id, gym.id)
        self.assertEqual(db.session.get(Trainer, join.id).gym_id, gym.id)
        self.assertIsNone(db.session.get(Trainer, drop.id).gym_id)

    def test_update_replaces_tags(self):
        old_tag = self.make_tag(name_en="Beginner Friendly")
        new_tag = self.make_tag(name_en="Fight Team", name_th="ทีมนักชก")
        gym = self.make_gym(tags=[old_tag])

        gym_service.update_gym(gym.id, {"tag_ids": [new_tag.id]})

        self.assertEqual([t.id for t in db.session.get(Gym, gym.id).tags], [new_tag.id])
        self.assertEqual(old_tag.gyms.count(), 0)

    def test_create_and_update_reject_unknown_province(self):
        with self.assertRaises(ValidationError) as ctx:
            gym_service.create_gym({"name_th": "ยิม", "province_id": 999})
        self.assertEqual(ctx.exception.details, {"province_id": 999})
        self.assertEqual(Gym.query.count(), 0)

        gym = self.make_gym(province_id=self.bangkok.id)
        with self.assertRaises(ValidationError):
            gym_service.update_gym(gym.id, {"province_id": 999})
        self.assertEqual(db.session.get(Gym, gym.id).province_id, self.bangkok.id)

    def test_update_empty_returns_current(self):
        gym = self.make_gym(name_en="Same")
        self.assertEqual(gym_service.update_gym(gym.id, {}).name_en, "Same")

    def test_update_inactive_gym_is_not_found(self):
        gym = self.make_gym(is_active=False)
        with self.assertRaises(NotFoundError):
            gym_service.update_gym(gym.id, {"name_en": "Changed"})

    def test_update_can_reactivate(self):
        gym = self.make_gym(is_active=False)
        self.assertTrue(gym_service.update_gym(gym.id, {"is_active": True}).is_active)

    def test_soft_delete(self):
        gym = self.make_gym()
        self.assertTrue(gym_service.delete_gym(gym.id))
        self.assertFalse(db.session.get(Gym, gym.id).is_active)
        self.assertFalse(gym_service.delete_gym(gym.id))
        self.assertFalse(gym_service.delete_gym(uuid.uuid4()))

    def test_images(self):
        gym = self.make_gym()
        image = gym_service.add_gym_image(gym.id, "https://cdn.example.com/a.jpg")
        self.assertEqual([i.id for i in gym_service.get_gym_images(gym.id)], [image.id])
        self.assertTrue(gym_service.remove_gym_image(image.id))
        self.assertFalse(gym_service.remove_gym_image(image.id))

    def test_gyms_by_province_only_active(self):
        self.make_gym(province_id=self.phuket.id)
        self.make_gym(province_id=self.phuket.id, is_active=False)
        self.assertEqual(len(gym_service.get_gyms_by_province(self.phuket.id)), 1)


class GymRoutesTest(AppTestCase):

    def test_list_envelope(self):
        self.make_gym(name_en="Listed")
        response = self.client.get("/api/gyms?page=1&pageSize=5")
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertTrue(body["success"])
        self.assertEqual(body["data"]["pageSize"], 5)
        self.assertEqual(body["data"]["items"][0]["name_en"], "Listed")

    def test_page_size_is_capped(self):
        response = self.client.get("/api/gyms?pageSize=500")
        self.assertEqual(response.status_code, 400)
        self.assertIn("pageSize", response.get_json()["details"])

    def test_create_requires_auth(self):
        response = self.client.post("/api/gyms", json={"name_th": "ยิม"})
        self.assertEqual(response.status_code, 401)
        self.assertFalse(response.get_json()["success"])

    def test_create_validates_fields(self):
        response = self.client.post(
            "/api/gyms",
            json={"name_th": "ยิม", "phone": "call me", "line_id": "bad id!"},
            headers=self.auth_headers(),
        )
        self.assertEqual(response.status_code, 400)
        details = response.get_json()["details"]
        self.assertIn("phone", details)
        self.assertIn("line_id", details)

    def test_create_and_fetch(self):
        headers = self.auth_headers()
        response = self.client.post(
            "/api/gyms",
            json={"name_th": "ยิมใหม่", "name_en": "New", "phone": "+66 (0) 81-234-5678", "line_id": "@newgym"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201)
        gym_id = response.get_json()["data"]["id"]

        fetched = self.client.get(f"/api/gyms/{gym_id}").get_json()["data"]
        self.assertEqual(fetched["name_en"], "New")
        self.assertEqual(fetched["images"], [])

    def test_unknown_province_returns_400(self):
        headers = self.auth_headers()
        response = self.client.post("/api/gyms", json={"name_th": "ยิม", "province_id": 999}, headers=headers)
        self.assertEqual(response.status_code, 400)
        body = response.get_json()
        self.assertEqual(body["error"], "Province does not exist")
        self.assertEqual(body["details"], {"province_id": 999})

        gym = self.make_gym()
        response = self.client.put(f"/api/gyms/{gym.id}", json={"province_id": 999}, headers=headers)
        self.assertEqual(response.status_code, 400)

    def test_update_requires_a_field(self):
        gym = self.make_gym()
        response = self.client.put(f"/api/gyms/{gym.id}", json={}, headers=self.auth_headers())
        self.assertEqual(response.status_code, 400)

    def test_missing_gym_returns_404(self):
        response = self.client.get(f"/api/gyms/{uuid.uuid4()}")
        self.assertEqual(response.status_code, 404)
        self.assertIn("not found", response.get_json()["error"])

    def test_delete(self):
        gym = self.make_gym()
        headers = self.auth_headers()
        self.assertEqual(self.client.delete(f"/api/gyms/{gym.id}", headers=headers).status_code, 200)
        self.assertEqual(self.client.delete(f"/api/gyms/{gym.id}", headers=headers).status_code, 404)

    def test_image_routes(self):
        gym = self.make_gym()
        headers = self.auth_headers()
        response = self.client.post(
            f"/api/gyms/{gym.id}/images", json={"image_url": "https://cdn.example.com/x.jpg"}, headers=headers
        )
        self.assertEqual(response.status_code, 201)
        image_id = response.get_json()["data"]["id"]
        self.assertEqual(len(self.client.get(f"/api/gyms/{gym.id}/images").get_json()["data"]), 1)
        self.assertEqual(self.client.delete(f"/api/gyms/images/{image_id}", headers=headers).status_code, 200)

    def test_gyms_by_province_route(self):
        province = self.make_province()
        self.make_gym(province_id=province.id)
        response = self.client.get(f"/api/provinces/{province.id}/gyms")
        self.assertEqual(len(response.get_json()["data"]), 1)
        self.assertEqual(self.client.get("/api/provinces/999/gyms").status_code, 404)
