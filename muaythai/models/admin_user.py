import uuid

from passlib.context import CryptContext

from muaythai.extensions import db
from muaythai.utils.time import utcnow, isoformat

ADMIN_ROLES = ("admin", "staff")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password, rounds=12):
    return pwd_context.handler("bcrypt").using(rounds=rounds).hash(password)


def verify_password(password, password_hash):
    return pwd_context.verify(password, password_hash)


class AdminUser(db.Model):
    __tablename__ = "admin_users"

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.String(20),
        db.CheckConstraint("role IN ('admin','staff')", name="ck_admin_users_role"),
        nullable=False,
        default="staff",
        index=True,
    )
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def set_password(self, password, rounds=12):
        self.password_hash = hash_password(password, rounds)

    def check_password(self, password):
        return verify_password(password, self.password_hash)

    @property
    def is_admin(self):
        return self.role == "admin"

    def to_dict(self):
        # never expose the password hash
        return {
            "id": str(self.id),
            "email": self.email,
            "role": self.role,
            "is_active": self.is_active,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<AdminUser {self.email} ({self.role})>"
