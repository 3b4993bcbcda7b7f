import uuid

from muaythai.extensions import db
from muaythai.models.associations import trainer_tags, trainer_classes
from muaythai.utils.time import utcnow, isoformat


class Trainer(db.Model):
    __tablename__ = "trainers"
    __table_args__ = (
        db.CheckConstraint(
            "NOT (is_freelance AND gym_id IS NOT NULL)",
            name="ck_trainers_freelance_without_gym",
        ),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    first_name_th = db.Column(db.String(100), nullable=False)
    last_name_th = db.Column(db.String(100))
    first_name_en = db.Column(db.String(100), nullable=False)
    last_name_en = db.Column(db.String(100))
    bio_th = db.Column(db.Text)
    bio_en = db.Column(db.Text)

    # Contact
    phone = db.Column(db.String(50))
    email = db.Column(db.String(255))
    line_id = db.Column(db.String(100))

    # Freelancers never belong to a gym; staff without a gym are "unassigned"
    is_freelance = db.Column(db.Boolean, nullable=False, default=False, index=True)
    gym_id = db.Column(db.Uuid, db.ForeignKey("gyms.id", ondelete="SET NULL"), nullable=True, index=True)
    province_id = db.Column(db.Integer, db.ForeignKey("provinces.id", ondelete="SET NULL"), index=True)
    exp_year = db.Column(db.Integer)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    # Timestamps
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    province = db.relationship("Province", back_populates="trainers")
    gym = db.relationship("Gym", back_populates="trainers")
    tags = db.relationship("Tag", secondary=trainer_tags, back_populates="trainers", lazy="selectin")
    classes = db.relationship("TrainingClass", secondary=trainer_classes, back_populates="trainers", lazy="selectin")

    def to_summary(self):
        return {
            "id": str(self.id),
            "first_name_th": self.first_name_th,
            "last_name_th": self.last_name_th,
            "first_name_en": self.first_name_en,
            "last_name_en": self.last_name_en,
        }

    def to_dict(self, include_classes=False, include_tags=False):
        data = {
            **self.to_summary(),
            "bio_th": self.bio_th,
            "bio_en": self.bio_en,
            "phone": self.phone,
            "email": self.email,
            "line_id": self.line_id,
            "is_freelance": self.is_freelance,
            "gym_id": str(self.gym_id) if self.gym_id else None,
            "province_id": self.province_id,
            "exp_year": self.exp_year,
            "is_active": self.is_active,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
            "province": self.province.to_summary() if self.province else None,
            "primaryGym": (
                {"id": str(self.gym.id), "name_th": self.gym.name_th, "name_en": self.gym.name_en}
                if self.gym else None
            ),
        }
        if include_classes:
            data["classes"] = [training_class.to_dict() for training_class in self.classes]
        if include_tags:
            data["tags"] = [tag.to_summary() for tag in self.tags]
        return data

    def __repr__(self):
        return f"<Trainer {self.id} {self.first_name_en}>"
