import uuid

from muaythai.extensions import db
from muaythai.models.associations import trainer_classes
from muaythai.utils.time import utcnow, isoformat


class TrainingClass(db.Model):
    """A class a trainer can teach, e.g. "Basic Muay Thai"."""

    __tablename__ = "classes"

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    name_th = db.Column(db.String(255), nullable=False)
    name_en = db.Column(db.String(255), nullable=False)
    description_th = db.Column(db.Text)
    description_en = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=utcnow)

    trainers = db.relationship("Trainer", secondary=trainer_classes, back_populates="classes", lazy="dynamic")

    def to_dict(self):
        return {
            "id": str(self.id),
            "name_th": self.name_th,
            "name_en": self.name_en,
            "description_th": self.description_th,
            "description_en": self.description_en,
            "created_at": isoformat(self.created_at),
        }
