# muaythai/services/tags.py
import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError

from muaythai.errors import ConflictError, NotFoundError
from muaythai.extensions import db
from muaythai.models import Tag, gym_tags, trainer_tags
from muaythai.utils.pagination import page_payload
from muaythai.utils.slug import slugify
from muaythai.utils.time import utcnow

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "name_th": Tag.name_th,
    "name_en": Tag.name_en,
    "id": Tag.id,
    "created_at": Tag.created_at,
    "updated_at": Tag.updated_at,
}


def generate_unique_slug(name_en, exclude_id=None):
    base = slugify(name_en)
    slug = base
    suffix = 2
    while True:
        query = Tag.query.filter(Tag.slug == slug)
        if exclude_id is not None:
            query = query.filter(Tag.id != exclude_id)
        if query.first() is None:
            return slug
        slug = f"{base}-{suffix}"
        suffix += 1


def _usage_counts(table, tag_ids):
    if not tag_ids:
        return {}
    rows = (
        db.session.query(table.c.tag_id, func.count())
        .filter(table.c.tag_id.in_(tag_ids))
        .group_by(table.c.tag_id)
        .all()
    )
    return dict(rows)


def _with_stats(tags):
    ids = [tag.id for tag in tags]
    gym_counts = _usage_counts(gym_tags, ids)
    trainer_counts = _usage_counts(trainer_tags, ids)
    return [
        tag.to_dict(gym_count=gym_counts.get(tag.id, 0), trainer_count=trainer_counts.get(tag.id, 0))
        for tag in tags
    ]


# ================================
# Queries
# ================================

def get_tags_paginated(page=1, page_size=20, search_term=None, sort_field="updated_at", sort_by="desc"):
    query = Tag.query
    if search_term and search_term.strip():
        pattern = f"%{search_term.strip()}%"
        query = query.filter(or_(Tag.name_th.ilike(pattern), Tag.name_en.ilike(pattern)))

    column = SORTABLE_FIELDS.get(sort_field, Tag.updated_at)
    ordering = column.asc() if sort_by == "asc" else column.desc()
    pagination = query.order_by(ordering, Tag.id.asc()).paginate(
        page=page, per_page=page_size, error_out=False
    )
    return page_payload(_with_stats(pagination.items), pagination.total, page, page_size)


def get_all_tags_with_stats():
    return _with_stats(Tag.query.order_by(Tag.name_en).all())


def get_tag_by_id(tag_id):
    return db.session.get(Tag, tag_id)


def get_tag_by_slug(slug):
    return Tag.query.filter_by(slug=slug).first()


def search_tags(term):
    pattern = f"%{term.strip()}%"
    return (
        Tag.query.filter(or_(Tag.name_th.ilike(pattern), Tag.name_en.ilike(pattern)))
        .order_by(Tag.name_en)
        .all()
    )


def get_tag_usage_stats(tag_id):
    tag = get_tag_by_id(tag_id)
    if tag is None:
        return None
    return _with_stats([tag])[0]


# ================================
# Mutations
# ================================

def create_tag(data):
    name_th = data["name_th"].strip()
    name_en = data["name_en"].strip()
    # a concurrent insert can take the slug between lookup and commit; retry once
    for attempt in range(2):
        tag = Tag(name_th=name_th, name_en=name_en, slug=generate_unique_slug(name_en))
        db.session.add(tag)
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning("Slug %r was taken while creating tag (attempt %d)", tag.slug, attempt + 1)
            if attempt:
                raise ConflictError("Tag slug already exists", details={"slug": tag.slug}) from e
        else:
            break
    logger.info("Created tag %s (%s)", tag.id, tag.slug)
    return tag


def update_tag(tag_id, data):
    tag = get_tag_by_id(tag_id)
    if tag is None:
        return None
    if "name_th" in data:
        tag.name_th = data["name_th"].strip()
    if "name_en" in data and data["name_en"].strip() != tag.name_en:
        tag.name_en = data["name_en"].strip()
        tag.slug = generate_unique_slug(tag.name_en, exclude_id=tag.id)
    tag.updated_at = utcnow()
    db.session.commit()
    logger.info("Updated tag %s", tag.id)
    return tag


def delete_tag(tag_id):
    """Delete an unused tag. Tags still linked to gyms or trainers are refused."""
    tag = get_tag_by_id(tag_id)
    if tag is None:
        return False

    gym_count = db.session.query(func.count()).select_from(gym_tags).filter(gym_tags.c.tag_id == tag_id).scalar()
    trainer_count = (
        db.session.query(func.count()).select_from(trainer_tags).filter(trainer_tags.c.tag_id == tag_id).scalar()
    )
    if gym_count or trainer_count:
        logger.warning("Refused to delete tag %s still in use", tag_id)
        raise ConflictError(
            f"Cannot delete tag: it is currently used by {gym_count} gyms and {trainer_count} trainers",
            details={"gymCount": gym_count, "trainerCount": trainer_count},
        )

    db.session.delete(tag)
    db.session.commit()
    logger.info("Deleted tag %s", tag_id)
    return True


def require_tag(tag_id):
    tag = get_tag_by_id(tag_id)
    if tag is None:
        raise NotFoundError("Tag", tag_id)
    return tag
