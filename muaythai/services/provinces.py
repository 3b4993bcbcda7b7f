# muaythai/services/provinces.py
import logging

from sqlalchemy import func, or_

from muaythai.errors import NotFoundError
from muaythai.extensions import db
from muaythai.models import Gym, Province

logger = logging.getLogger(__name__)

# Province ids as seeded, grouped by region (inclusive ranges)
REGIONS = {
    "central": (1, 23),
    "eastern": (24, 30),
    "northern": (31, 39),
    "northeastern": (40, 59),
    "southern": (60, 74),
    "western": (75, 76),
}


def get_all_provinces(sort="en"):
    order = Province.name_th if sort == "th" else Province.name_en
    return Province.query.order_by(order).all()


def get_province_by_id(province_id):
    province = db.session.get(Province, province_id)
    if province is None:
        raise NotFoundError("Province", province_id)
    return province


def get_provinces_by_region(region):
    bounds = REGIONS.get((region or "").lower())
    if bounds is None:
        return []
    low, high = bounds
    return (
        Province.query.filter(Province.id.between(low, high))
        .order_by(Province.name_en)
        .all()
    )


def search_provinces(term):
    pattern = f"%{term.strip()}%"
    return (
        Province.query.filter(or_(Province.name_th.ilike(pattern), Province.name_en.ilike(pattern)))
        .order_by(Province.name_en)
        .all()
    )


def get_province_count():
    return db.session.query(func.count(Province.id)).scalar() or 0


def get_provinces_with_gym_counts():
    rows = (
        db.session.query(Province, func.count(Gym.id).label("gym_count"))
        .outerjoin(Gym, Gym.province_id == Province.id)
        .group_by(Province.id)
        .order_by(Province.name_en)
        .all()
    )
    return [{**province.to_dict(), "gym_count": gym_count} for province, gym_count in rows]


def get_province_stats():
    with_counts = get_provinces_with_gym_counts()
    provinces_with_gyms = sum(1 for row in with_counts if row["gym_count"] > 0)
    return {
        "total_provinces": len(with_counts),
        "provinces_with_gyms": provinces_with_gyms,
        "provinces_without_gyms": len(with_counts) - provinces_with_gyms,
        "total_gyms": sum(row["gym_count"] for row in with_counts),
        "regions": {name: high - low + 1 for name, (low, high) in REGIONS.items()},
    }
