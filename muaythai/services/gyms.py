# muaythai/services/gyms.py
import logging

from sqlalchemy import or_

from muaythai.errors import NotFoundError, ValidationError
from muaythai.extensions import db
from muaythai.models import Gym, GymImage, Province, Tag, Trainer
from muaythai.utils.pagination import paginate_query
from muaythai.utils.time import utcnow

logger = logging.getLogger(__name__)

GYM_FIELDS = (
    "name_th", "name_en", "description_th", "description_en", "phone", "email",
    "province_id", "map_url", "youtube_url", "line_id", "is_active",
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


def _load_assignable_trainers(trainer_ids):
    trainer_ids = list(dict.fromkeys(trainer_ids))
    trainers = Trainer.query.filter(Trainer.id.in_(trainer_ids)).all() if trainer_ids else []
    missing = set(trainer_ids) - {trainer.id for trainer in trainers}
    if missing:
        raise ValidationError(
            "Unknown trainer ids", details={"trainer_ids": sorted(str(i) for i in missing)}
        )
    freelancers = [str(trainer.id) for trainer in trainers if trainer.is_freelance]
    if freelancers:
        raise ValidationError(
            "Freelance trainers cannot be assigned to a gym", details={"trainer_ids": freelancers}
        )
    return trainers


def _sync_trainers(gym, trainer_ids):
    """Make ``trainer_ids`` the exact set of trainers attached to ``gym``."""
    wanted = _load_assignable_trainers(trainer_ids)
    wanted_ids = {trainer.id for trainer in wanted}
    for trainer in gym.trainers.all():
        if trainer.id not in wanted_ids:
            trainer.gym = None
            trainer.updated_at = utcnow()
    for trainer in wanted:
        trainer.gym = gym
        trainer.updated_at = utcnow()


# ================================
# Queries
# ================================

def gym_list_query(search=None, province_id=None, include_inactive=False):
    query = Gym.query.outerjoin(Province, Gym.province_id == Province.id)
    if not include_inactive:
        query = query.filter(Gym.is_active.is_(True))
    if province_id:
        query = query.filter(Gym.province_id == province_id)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(
            Gym.name_th.ilike(pattern),
            Gym.name_en.ilike(pattern),
            Gym.description_th.ilike(pattern),
            Gym.description_en.ilike(pattern),
            Province.name_th.ilike(pattern),
            Province.name_en.ilike(pattern),
        ))
    return query.order_by(Gym.created_at.desc())


def get_all_gyms(page=1, page_size=10, search=None, province_id=None, include_inactive=False):
    query = gym_list_query(search, province_id, include_inactive)
    return paginate_query(query, page, page_size, lambda gym: gym.to_dict())


def search_gyms(term, page=1, page_size=10):
    return get_all_gyms(page=page, page_size=page_size, search=term)


def get_gym_by_id(gym_id, include_inactive=False):
    gym = db.session.get(Gym, gym_id)
    if gym is None or (not gym.is_active and not include_inactive):
        raise NotFoundError("Gym", gym_id)
    return gym


def get_gym_images(gym_id):
    gym = get_gym_by_id(gym_id)
    return list(gym.images)


def get_gyms_by_province(province_id):
    return (
        Gym.query.filter_by(province_id=province_id, is_active=True)
        .order_by(Gym.created_at.desc())
        .all()
    )


# ================================
# Mutations
# ================================

def create_gym(data):
    data = dict(data)
    tag_ids = data.pop("tag_ids", None) or []
    trainer_ids = data.pop("trainer_ids", None) or []
    _check_province(data.get("province_id"))

    gym = Gym(**{key: value for key, value in data.items() if key in GYM_FIELDS})
    gym.tags = _load_tags(tag_ids)
    db.session.add(gym)
    if trainer_ids:
        for trainer in _load_assignable_trainers(trainer_ids):
            trainer.gym = gym
            trainer.updated_at = utcnow()
    db.session.commit()
    logger.info("Created gym %s (%s)", gym.id, gym.name_th)
    return gym


def update_gym(gym_id, data):
    # inactive gyms can only be touched to reactivate them
    gym = get_gym_by_id(gym_id, include_inactive=bool(data.get("is_active")))
    if not data:
        return gym

    data = dict(data)
    tag_ids = data.pop("tag_ids", None)
    trainer_ids = data.pop("trainer_ids", None)
    if "province_id" in data:
        _check_province(data["province_id"])

    for key, value in data.items():
        if key in GYM_FIELDS:
            setattr(gym, key, value)
    if tag_ids is not None:
        gym.tags = _load_tags(tag_ids)
    if trainer_ids is not None:
        _sync_trainers(gym, trainer_ids)
    gym.updated_at = utcnow()
    db.session.commit()
    logger.info("Updated gym %s", gym.id)
    return gym


def delete_gym(gym_id):
    """Soft delete. Returns False when there is no active gym to delete."""
    gym = Gym.query.filter_by(id=gym_id, is_active=True).first()
    if gym is None:
        return False
    gym.is_active = False
    gym.updated_at = utcnow()
    db.session.commit()
    logger.info("Deactivated gym %s", gym.id)
    return True


def add_gym_image(gym_id, image_url):
    gym = get_gym_by_id(gym_id)
    image = GymImage(gym=gym, image_url=image_url)
    db.session.add(image)
    db.session.commit()
    return image


def remove_gym_image(image_id):
    image = db.session.get(GymImage, image_id)
    if image is None:
        return False
    db.session.delete(image)
    db.session.commit()
    return True
