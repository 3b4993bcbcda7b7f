# muaythai/services/trainers.py
import logging

from sqlalchemy import or_

from muaythai.errors import NotFoundError, ValidationError
from muaythai.extensions import db
from muaythai.models import Gym, Province, Tag, Trainer, TrainingClass, trainer_classes
from muaythai.utils.pagination import empty_page, paginate_query
from muaythai.utils.time import utcnow

logger = logging.getLogger(__name__)

TRAINER_FIELDS = (
    "first_name_th", "last_name_th", "first_name_en", "last_name_en", "bio_th", "bio_en",
    "phone", "email", "line_id", "is_freelance", "gym_id", "province_id", "exp_year", "is_active",
)


def _check_province(province_id):
    if province_id is None:
        return
    if db.session.get(Province, province_id) is None:
        raise ValidationError("Province does not exist", details={"province_id": province_id})


def _load_tags(tag_ids):
    tag_ids = list(dict.fromkeys(tag_ids))
    tags = Tag.query.filter(Tag.id.in_(tag_ids)).all() if tag_ids else []
    missing = set(tag_ids) - {tag.id for tag in tags}
    if missing:
        raise ValidationError("Unknown tag ids", details={"tag_ids": sorted(missing)})
    return tags


def _load_classes(class_ids):
    class_ids = list(dict.fromkeys(class_ids))
    classes = TrainingClass.query.filter(TrainingClass.id.in_(class_ids)).all() if class_ids else []
    missing = set(class_ids) - {training_class.id for training_class in classes}
    if missing:
        raise ValidationError(
            "Unknown class ids", details={"class_ids": sorted(str(i) for i in missing)}
        )
    return classes


def _check_gym(gym_id):
    if gym_id is None:
        return
    gym = db.session.get(Gym, gym_id)
    if gym is None or not gym.is_active:
        raise ValidationError("Gym does not exist or is inactive", details={"gym_id": str(gym_id)})


# ================================
# Queries
# ================================

def get_all_trainers(page=1, page_size=20, search=None, province_id=None, gym_id=None,
                     is_freelance=None, include_inactive=False, include_classes=False,
                     unassigned_only=False):
    query = (
        Trainer.query
        .outerjoin(Province, Trainer.province_id == Province.id)
        .outerjoin(Gym, Trainer.gym_id == Gym.id)
    )
    if not include_inactive:
        query = query.filter(Trainer.is_active.is_(True))
    if province_id:
        query = query.filter(Trainer.province_id == province_id)
    if gym_id:
        query = query.filter(Trainer.gym_id == gym_id)
    if is_freelance is not None:
        query = query.filter(Trainer.is_freelance.is_(is_freelance))
    if unassigned_only:
        query = query.filter(Trainer.is_freelance.is_(False), Trainer.gym_id.is_(None))
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(
            Trainer.first_name_th.ilike(pattern),
            Trainer.last_name_th.ilike(pattern),
            Trainer.first_name_en.ilike(pattern),
            Trainer.last_name_en.ilike(pattern),
            Trainer.bio_th.ilike(pattern),
            Trainer.bio_en.ilike(pattern),
            Province.name_th.ilike(pattern),
            Province.name_en.ilike(pattern),
            Gym.name_th.ilike(pattern),
            Gym.name_en.ilike(pattern),
        ))
    query = query.order_by(Trainer.created_at.desc())
    return paginate_query(
        query, page, page_size,
        lambda trainer: trainer.to_dict(include_classes=include_classes),
    )


def search_trainers(term, page=1, page_size=20):
    if not term or not term.strip():
        return empty_page(page, page_size)
    return get_all_trainers(page=page, page_size=page_size, search=term)


def get_trainer_by_id(trainer_id, include_inactive=False):
    trainer = db.session.get(Trainer, trainer_id)
    if trainer is None or (not trainer.is_active and not include_inactive):
        raise NotFoundError("Trainer", trainer_id)
    return trainer


def get_trainers_by_gym(gym_id):
    return (
        Trainer.query.filter_by(gym_id=gym_id, is_active=True)
        .order_by(Trainer.created_at.desc())
        .all()
    )


def get_trainers_by_province(province_id):
    return (
        Trainer.query.filter_by(province_id=province_id, is_active=True)
        .order_by(Trainer.created_at.desc())
        .all()
    )


def get_freelance_trainers():
    return (
        Trainer.query.filter_by(is_freelance=True, is_active=True)
        .order_by(Trainer.created_at.desc())
        .all()
    )


def get_unassigned_trainers():
    return (
        Trainer.query.filter(
            Trainer.is_active.is_(True),
            Trainer.is_freelance.is_(False),
            Trainer.gym_id.is_(None),
        )
        .order_by(Trainer.created_at.desc())
        .all()
    )


def get_trainer_classes(trainer_id):
    return list(get_trainer_by_id(trainer_id).classes)


# ================================
# Mutations
# ================================

def create_trainer(data):
    data = dict(data)
    tag_ids = data.pop("tag_ids", None) or []
    class_ids = data.pop("class_ids", None) or []

    if data.get("is_freelance") and data.get("gym_id"):
        raise ValidationError("Freelance trainers cannot be assigned to a gym")
    _check_gym(data.get("gym_id"))
    _check_province(data.get("province_id"))

    trainer = Trainer(**{key: value for key, value in data.items() if key in TRAINER_FIELDS})
    trainer.tags = _load_tags(tag_ids)
    trainer.classes = _load_classes(class_ids)
    db.session.add(trainer)
    db.session.commit()
    logger.info("Created trainer %s (%s)", trainer.id, trainer.first_name_en)
    return trainer


def update_trainer(trainer_id, data):
    trainer = get_trainer_by_id(trainer_id, include_inactive=bool(data.get("is_active")))
    data = dict(data)
    tag_ids = data.pop("tag_ids", None)
    class_ids = data.pop("class_ids", None)

    is_freelance = data.get("is_freelance", trainer.is_freelance)
    if is_freelance:
        if data.get("gym_id"):
            raise ValidationError("Freelance trainers cannot be assigned to a gym")
        # becoming freelance drops the gym
        data["gym_id"] = None
    elif "gym_id" in data:
        _check_gym(data["gym_id"])
    if "province_id" in data:
        _check_province(data["province_id"])

    for key, value in data.items():
        if key in TRAINER_FIELDS:
            setattr(trainer, key, value)
    if tag_ids is not None:
        trainer.tags = _load_tags(tag_ids)
    if class_ids is not None:
        trainer.classes = _load_classes(class_ids)
    trainer.updated_at = utcnow()
    db.session.commit()
    logger.info("Updated trainer %s", trainer.id)
    return trainer


def delete_trainer(trainer_id):
    trainer = Trainer.query.filter_by(id=trainer_id, is_active=True).first()
    if trainer is None:
        return False
    trainer.is_active = False
    trainer.updated_at = utcnow()
    db.session.commit()
    logger.info("Deactivated trainer %s", trainer.id)
    return True


def add_trainer_class(trainer_id, class_id):
    trainer = get_trainer_by_id(trainer_id)
    training_class = db.session.get(TrainingClass, class_id)
    if training_class is None:
        raise NotFoundError("Class", class_id)
    if training_class not in trainer.classes:
        trainer.classes.append(training_class)
        db.session.commit()
    return trainer


def remove_trainer_class(trainer_id, class_id):
    get_trainer_by_id(trainer_id)
    result = db.session.execute(
        trainer_classes.delete().where(
            trainer_classes.c.trainer_id == trainer_id,
            trainer_classes.c.class_id == class_id,
        )
    )
    db.session.commit()
    return result.rowcount > 0
