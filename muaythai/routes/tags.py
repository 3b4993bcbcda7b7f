# muaythai/routes/tags.py
from flask import Blueprint

from muaythai.errors import NotFoundError
from muaythai.schemas.tag import TagCreateSchema, TagQuerySchema, TagUpdateSchema
from muaythai.services import tags as tag_service
from muaythai.utils.decorators import auth_required
from muaythai.utils.request import load_args, load_json
from muaythai.utils.responses import success

tags_bp = Blueprint("tags", __name__)

tag_query_schema = TagQuerySchema()
tag_create_schema = TagCreateSchema()
tag_update_schema = TagUpdateSchema()


@tags_bp.route("/tags", methods=["GET"])
def list_tags():
    params = load_args(tag_query_schema)
    return success(tag_service.get_tags_paginated(**params))


@tags_bp.route("/tags/stats", methods=["GET"])
def all_tag_stats():
    return success(tag_service.get_all_tags_with_stats())


@tags_bp.route("/tags/<int:tag_id>", methods=["GET"])
def get_tag(tag_id):
    return success(tag_service.require_tag(tag_id).to_dict())


@tags_bp.route("/tags/<int:tag_id>/stats", methods=["GET"])
def tag_stats(tag_id):
    stats = tag_service.get_tag_usage_stats(tag_id)
    if stats is None:
        raise NotFoundError("Tag", tag_id)
    return success(stats)


@tags_bp.route("/tags/slug/<string:slug>", methods=["GET"])
def get_tag_by_slug(slug):
    tag = tag_service.get_tag_by_slug(slug)
    if tag is None:
        raise NotFoundError(f"Tag '{slug}'")
    return success(tag.to_dict())


@tags_bp.route("/tags/search/<string:query>", methods=["GET"])
def search_tags(query):
    return success([tag.to_dict() for tag in tag_service.search_tags(query)])


@tags_bp.route("/tags", methods=["POST"])
@auth_required
def create_tag():
    data = load_json(tag_create_schema)
    tag = tag_service.create_tag(data)
    return success(tag.to_dict(), "Tag created successfully", 201)


@tags_bp.route("/tags/<int:tag_id>", methods=["PUT"])
@auth_required
def update_tag(tag_id):
    data = load_json(tag_update_schema)
    tag = tag_service.update_tag(tag_id, data)
    if tag is None:
        raise NotFoundError("Tag", tag_id)
    return success(tag.to_dict(), "Tag updated successfully")


@tags_bp.route("/tags/<int:tag_id>", methods=["DELETE"])
@auth_required
def delete_tag(tag_id):
    if not tag_service.delete_tag(tag_id):
        raise NotFoundError("Tag", tag_id)
    return success(message="Tag deleted successfully")
