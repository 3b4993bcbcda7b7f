import uuid

from muaythai.extensions import db
from muaythai.models.associations import gym_tags
from muaythai.utils.time import utcnow, isoformat


class Gym(db.Model):
    __tablename__ = "gyms"

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    name_th = db.Column(db.String(255), nullable=False)
    name_en = db.Column(db.String(255))
    description_th = db.Column(db.Text)
    description_en = db.Column(db.Text)

    # Contact
    phone = db.Column(db.String(50))
    email = db.Column(db.String(255))
    line_id = db.Column(db.String(100))
    map_url = db.Column(db.Text)
    youtube_url = db.Column(db.Text)

    province_id = db.Column(db.Integer, db.ForeignKey("provinces.id", ondelete="SET NULL"), index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    # Timestamps
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    province = db.relationship("Province", back_populates="gyms")
    images = db.relationship(
        "GymImage", back_populates="gym", cascade="all, delete-orphan",
        order_by="GymImage.created_at", lazy="selectin",
    )
    tags = db.relationship("Tag", secondary=gym_tags, back_populates="gyms", lazy="selectin")
    trainers = db.relationship("Trainer", back_populates="gym", lazy="dynamic")

    def to_dict(self, include_details=False):
        data = {
            "id": str(self.id),
            "name_th": self.name_th,
            "name_en": self.name_en,
            "description_th": self.description_th,
            "description_en": self.description_en,
            "phone": self.phone,
            "email": self.email,
            "province_id": self.province_id,
            "map_url": self.map_url,
            "youtube_url": self.youtube_url,
            "line_id": self.line_id,
            "is_active": self.is_active,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
            "province": self.province.to_summary() if self.province else None,
        }
        if include_details:
            data["images"] = [image.to_dict() for image in self.images]
            data["tags"] = [tag.to_summary() for tag in self.tags]
            from muaythai.models.trainer import Trainer

            active_trainers = self.trainers.filter_by(is_active=True).order_by(Trainer.first_name_th)
            data["associatedTrainers"] = [trainer.to_summary() for trainer in active_trainers]
        return data

    def __repr__(self):
        return f"<Gym {self.id} {self.name_th}>"


class GymImage(db.Model):
    __tablename__ = "gym_images"

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    gym_id = db.Column(db.Uuid, db.ForeignKey("gyms.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    gym = db.relationship("Gym", back_populates="images")

    def to_dict(self):
        return {
            "id": str(self.id),
            "gym_id": str(self.gym_id),
            "image_url": self.image_url,
            "created_at": isoformat(self.created_at),
        }
