from flask import Blueprint

from muaythai.schemas.training_class import ClassCreateSchema, ClassUpdateSchema
from muaythai.services import classes as class_service
from muaythai.utils.decorators import auth_required
from muaythai.utils.request import load_json
from muaythai.utils.responses import success

classes_bp = Blueprint("classes", __name__)

class_create_schema = ClassCreateSchema()
class_update_schema = ClassUpdateSchema()


@classes_bp.route("/classes", methods=["GET"])
def list_classes():
    return success([training_class.to_dict() for training_class in class_service.get_all_classes()])


@classes_bp.route("/classes/<uuid:class_id>", methods=["GET"])
def get_class(class_id):
    return success(class_service.get_class_by_id(class_id).to_dict())


@classes_bp.route("/classes", methods=["POST"])
@auth_required
def create_class():
    training_class = class_service.create_class(load_json(class_create_schema))
    return success(training_class.to_dict(), "Class created successfully", 201)


@classes_bp.route("/classes/<uuid:class_id>", methods=["PUT"])
@auth_required
def update_class(class_id):
    training_class = class_service.update_class(class_id, load_json(class_update_schema))
    return success(training_class.to_dict(), "Class updated successfully")
