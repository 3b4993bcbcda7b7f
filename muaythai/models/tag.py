from muaythai.extensions import db
from muaythai.models.associations import gym_tags, trainer_tags
from muaythai.utils.time import utcnow, isoformat


class Tag(db.Model):
    __tablename__ = "tags"

    id = db.Column(db.Integer, primary_key=True)
    name_th = db.Column(db.String(100), nullable=False)
    name_en = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(120), nullable=False, unique=True, index=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    gyms = db.relationship("Gym", secondary=gym_tags, back_populates="tags", lazy="dynamic")
    trainers = db.relationship("Trainer", secondary=trainer_tags, back_populates="tags", lazy="dynamic")

    def to_summary(self):
        return {"id": self.id, "name_th": self.name_th, "name_en": self.name_en, "slug": self.slug}

    def to_dict(self, gym_count=None, trainer_count=None):
        data = {
            **self.to_summary(),
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }
        if gym_count is not None:
            data["gymCount"] = gym_count
        if trainer_count is not None:
            data["trainerCount"] = trainer_count
        return data
