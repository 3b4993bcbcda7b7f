from muaythai.extensions import db
from muaythai.utils.time import utcnow

# ================================
# Many-to-many join tables
# ================================
gym_tags = db.Table(
    "gym_tags",
    db.Column("gym_id", db.Uuid, db.ForeignKey("gyms.id", ondelete="CASCADE"), primary_key=True),
    db.Column("tag_id", db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    db.Column("created_at", db.DateTime, default=utcnow),
)

trainer_tags = db.Table(
    "trainer_tags",
    db.Column("trainer_id", db.Uuid, db.ForeignKey("trainers.id", ondelete="CASCADE"), primary_key=True),
    db.Column("tag_id", db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    db.Column("created_at", db.DateTime, default=utcnow),
)

trainer_classes = db.Table(
    "trainer_classes",
    db.Column("trainer_id", db.Uuid, db.ForeignKey("trainers.id", ondelete="CASCADE"), primary_key=True),
    db.Column("class_id", db.Uuid, db.ForeignKey("classes.id", ondelete="CASCADE"), primary_key=True),
    db.Column("created_at", db.DateTime, default=utcnow),
)
