# muaythai/services/dashboard.py
import logging

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError

from muaythai.errors import ApiError
from muaythai.extensions import db
from muaythai.models import Gym, Province, Trainer

logger = logging.getLogger(__name__)

UNKNOWN_PROVINCE_NAME = "ไม่ระบุจังหวัด"
TOP_PROVINCES_LIMIT = 5


def _count_if(condition):
    return func.sum(case((condition, 1), else_=0))


def _counts_by_province(model, limit=None):
    query = (
        db.session.query(
            model.province_id,
            Province.name_th,
            Province.name_en,
            func.count(model.id).label("total"),
        )
        .outerjoin(Province, model.province_id == Province.id)
        .filter(model.is_active.is_(True))
        .group_by(model.province_id, Province.name_th, Province.name_en)
        .order_by(func.count(model.id).desc(), Province.name_th)
    )
    if limit:
        query = query.limit(limit)
    key = "trainerCount" if model is Trainer else "gymCount"
    return [
        {
            "provinceId": province_id or 0,
            "provinceName": name_th or UNKNOWN_PROVINCE_NAME,
            "provinceNameEn": name_en,
            key: total,
        }
        for province_id, name_th, name_en, total in query.all()
    ]


def get_trainer_counts_by_province(limit=None):
    try:
        return _counts_by_province(Trainer, limit)
    except SQLAlchemyError as e:
        logger.exception("Trainer counts by province failed")
        raise ApiError("Failed to fetch dashboard statistics", 500) from e


def get_gym_counts_by_province(limit=None):
    try:
        return _counts_by_province(Gym, limit)
    except SQLAlchemyError as e:
        logger.exception("Gym counts by province failed")
        raise ApiError("Failed to fetch dashboard statistics", 500) from e


def get_dashboard_stats():
    try:
        # ==================== Trainers ====================
        active = Trainer.is_active.is_(True)
        trainer_row = db.session.query(
            func.count(Trainer.id),
            _count_if(active),
            _count_if(Trainer.is_active.is_(False)),
            _count_if(active & Trainer.is_freelance.is_(True)),
            _count_if(active & Trainer.is_freelance.is_(False)),
            _count_if(active & Trainer.is_freelance.is_(False) & Trainer.gym_id.is_(None)),
        ).one()

        # ==================== Gyms ====================
        gym_row = db.session.query(
            func.count(Gym.id),
            _count_if(Gym.is_active.is_(True)),
            _count_if(Gym.is_active.is_(False)),
        ).one()

        top_trainers = _counts_by_province(Trainer, TOP_PROVINCES_LIMIT)
        top_gyms = _counts_by_province(Gym, TOP_PROVINCES_LIMIT)
    except SQLAlchemyError as e:
        logger.exception("Dashboard statistics query failed")
        raise ApiError("Failed to fetch dashboard statistics", 500) from e

    total, active_count, inactive, freelance, staff, unassigned = (int(value or 0) for value in trainer_row)
    total_gyms, active_gyms, inactive_gyms = (int(value or 0) for value in gym_row)
    return {
        "totalTrainers": total,
        "activeTrainers": active_count,
        "inactiveTrainers": inactive,
        "freelanceTrainers": freelance,
        "staffTrainers": staff,
        "unassignedTrainers": unassigned,
        "totalGyms": total_gyms,
        "activeGyms": active_gyms,
        "inactiveGyms": inactive_gyms,
        "topProvincesByTrainers": top_trainers,
        "topProvincesByGyms": top_gyms,
    }
