import unittest
from datetime import datetime, timedelta

from muaythai import create_app
from muaythai.extensions import db
from muaythai.models import AdminUser, Gym, Province, Tag, Trainer, TrainingClass
from muaythai.services.auth import issue_tokens
from muaythai.utils.slug import slugify


class AppTestCase(unittest.TestCase):
    config_name = "testing"

    def setUp(self):
        self.app = self.create_app()
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.create_all()
        self.client = self.app.test_client()
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def create_app(self):
        return create_app(self.config_name)

    # ---------- factories ----------

    def tick(self):
        """Strictly increasing timestamps so created_at ordering is deterministic."""
        self._clock += timedelta(minutes=1)
        return self._clock

    def make_province(self, name_en="Bangkok", name_th="กรุงเทพมหานคร", id=None):
        province = Province(id=id, name_en=name_en, name_th=name_th)
        db.session.add(province)
        db.session.commit()
        return province

    def make_gym(self, name_th="ยิมทดสอบ", name_en="Test Gym", **fields):
        fields.setdefault("created_at", self.tick())
        gym = Gym(name_th=name_th, name_en=name_en, **fields)
        db.session.add(gym)
        db.session.commit()
        return gym

    def make_trainer(self, first_name_en="Somchai", first_name_th="สมชาย", **fields):
        fields.setdefault("created_at", self.tick())
        trainer = Trainer(first_name_en=first_name_en, first_name_th=first_name_th, **fields)
        db.session.add(trainer)
        db.session.commit()
        return trainer

    def make_tag(self, name_en="Beginner Friendly", name_th="เหมาะสำหรับผู้เริ่มต้น", slug=None):
        tag = Tag(name_en=name_en, name_th=name_th, slug=slug or slugify(name_en))
        db.session.add(tag)
        db.session.commit()
        return tag

    def make_class(self, name_en="Basic Muay Thai", name_th="มวยไทยพื้นฐาน"):
        training_class = TrainingClass(name_en=name_en, name_th=name_th)
        db.session.add(training_class)
        db.session.commit()
        return training_class

    def make_admin(self, email="admin@example.com", password="password123", role="admin", is_active=True):
        user = AdminUser(email=email, role=role, is_active=is_active)
        user.set_password(password, rounds=4)
        db.session.add(user)
        db.session.commit()
        return user

    def auth_headers(self, user=None):
        user = user or self.make_admin()
        token = issue_tokens(user)["access_token"]
        return {"Authorization": f"Bearer {token}"}
