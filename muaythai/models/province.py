from muaythai.extensions import db
from muaythai.utils.time import utcnow, isoformat


class Province(db.Model):
    __tablename__ = "provinces"

    id = db.Column(db.Integer, primary_key=True)
    name_th = db.Column(db.String(100), nullable=False)
    name_en = db.Column(db.String(100), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow)

    gyms = db.relationship("Gym", back_populates="province", lazy="dynamic")
    trainers = db.relationship("Trainer", back_populates="province", lazy="dynamic")

    def to_dict(self):
        return {
            "id": self.id,
            "name_th": self.name_th,
            "name_en": self.name_en,
            "created_at": isoformat(self.created_at),
        }

    def to_summary(self):
        return {"id": self.id, "name_th": self.name_th, "name_en": self.name_en}

    def __repr__(self):
        return f"<Province {self.id} {self.name_en}>"
