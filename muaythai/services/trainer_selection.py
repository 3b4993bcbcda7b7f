# muaythai/services/trainer_selection.py
"""Lookups used by the admin UI when attaching trainers to a gym.

Only staff trainers without a gym are offered; freelancers never join gyms.
"""
import logging

from sqlalchemy import or_

from muaythai.extensions import db
from muaythai.models import Province, Trainer
from muaythai.utils.pagination import page_payload

logger = logging.getLogger(__name__)

SELECTION_SORTS = {
    "name": (Trainer.first_name_th.asc(),),
    "experience": (Trainer.exp_year.is_(None), Trainer.exp_year.desc()),
    "recent": (Trainer.created_at.desc(),),
}
MAX_QUICK_SEARCH = 50


def selection_row(trainer, province=None):
    province = province if province is not None else trainer.province
    return {
        "id": str(trainer.id),
        "first_name_th": trainer.first_name_th,
        "last_name_th": trainer.last_name_th,
        "first_name_en": trainer.first_name_en,
        "last_name_en": trainer.last_name_en,
        "email": trainer.email,
        "phone": trainer.phone,
        "exp_year": trainer.exp_year,
        "province": province.to_summary() if province else None,
    }


def _available_query(search_term=None, province_id=None, exclude_ids=None):
    query = (
        db.session.query(Trainer, Province)
        .outerjoin(Province, Trainer.province_id == Province.id)
        .filter(
            Trainer.is_active.is_(True),
            Trainer.is_freelance.is_(False),
            Trainer.gym_id.is_(None),
        )
    )
    if search_term and search_term.strip():
        pattern = f"%{search_term.strip()}%"
        query = query.filter(or_(
            Trainer.first_name_th.ilike(pattern),
            Trainer.last_name_th.ilike(pattern),
            Trainer.first_name_en.ilike(pattern),
            Trainer.last_name_en.ilike(pattern),
            Province.name_th.ilike(pattern),
        ))
    if province_id:
        query = query.filter(Trainer.province_id == province_id)
    if exclude_ids:
        query = query.filter(Trainer.id.notin_(list(exclude_ids)))
    return query


def get_available_trainers_for_selection(search_term=None, province_id=None, exclude_ids=None,
                                         page=1, page_size=50, sort_by="name"):
    query = _available_query(search_term, province_id, exclude_ids)
    total = query.order_by(None).count()
    rows = (
        query.order_by(*SELECTION_SORTS.get(sort_by, SELECTION_SORTS["name"]))
        .limit(page_size)
        .offset((page - 1) * page_size)
        .all()
    )
    items = [selection_row(trainer, province) for trainer, province in rows]
    return page_payload(items, total, page, page_size)


def get_gym_trainers(gym_id):
    trainers = (
        Trainer.query.filter(Trainer.gym_id == gym_id, Trainer.is_active.is_(True))
        .order_by(Trainer.first_name_th.asc())
        .all()
    )
    return [selection_row(trainer) for trainer in trainers]


def search_trainers_for_selection(term, limit=10):
    if not term or not term.strip():
        return []
    limit = max(1, min(limit, MAX_QUICK_SEARCH))
    rows = (
        _available_query(search_term=term)
        .order_by(Trainer.first_name_th.asc())
        .limit(limit)
        .all()
    )
    return [selection_row(trainer, province) for trainer, province in rows]
