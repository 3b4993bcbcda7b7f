import unittest

from muaythai import create_app
from muaythai.config import ProductionConfig, TestingConfig


class ConfigTest(unittest.TestCase):

    def test_production_requires_long_jwt_secret(self):
        class WeakProduction(ProductionConfig):
            JWT_SECRET_KEY = "short"
            SECRET_KEY = "x"
            SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"

        with self.assertRaises(RuntimeError):
            create_app(WeakProduction)

    def test_production_accepts_valid_settings(self):
        class StrongProduction(ProductionConfig):
            JWT_SECRET_KEY = "p" * 40
            SECRET_KEY = "x"
            SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
            SQLALCHEMY_ENGINE_OPTIONS = {}
            RATELIMIT_ENABLED = False

        app = create_app(StrongProduction)
        self.assertFalse(app.debug)
        self.assertIn("Strict-Transport-Security", app.config["SECURITY_HEADERS"])

    def test_testing_config(self):
        app = create_app("testing")
        self.assertTrue(app.testing)
        self.assertEqual(app.config["SQLALCHEMY_DATABASE_URI"], TestingConfig.SQLALCHEMY_DATABASE_URI)
        self.assertEqual(app.config["JWT_DECODE_AUDIENCE"], "mymuaythai-admin")
