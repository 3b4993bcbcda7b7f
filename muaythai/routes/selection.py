# muaythai/routes/selection.py
import uuid

from flask import Blueprint

from muaythai.errors import ValidationError
from muaythai.schemas.trainer import TrainerQuickSearchSchema, TrainerSelectionQuerySchema
from muaythai.services import trainer_selection
from muaythai.utils.decorators import auth_required
from muaythai.utils.request import load_args
from muaythai.utils.responses import success

selection_bp = Blueprint("selection", __name__)

selection_query_schema = TrainerSelectionQuerySchema()
quick_search_schema = TrainerQuickSearchSchema()


def parse_exclude_ids(raw):
    if not raw:
        return []
    try:
        return [uuid.UUID(part.strip()) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise ValidationError("excludeIds must be a comma-separated list of trainer ids") from None


@selection_bp.route("/selection/trainers/available", methods=["GET"])
@auth_required
def available_trainers():
    params = load_args(selection_query_schema)
    params["exclude_ids"] = parse_exclude_ids(params["exclude_ids"])
    return success(trainer_selection.get_available_trainers_for_selection(**params))


@selection_bp.route("/selection/trainers/gym/<uuid:gym_id>", methods=["GET"])
@auth_required
def gym_trainers(gym_id):
    return success(trainer_selection.get_gym_trainers(gym_id))


@selection_bp.route("/selection/trainers/search", methods=["GET"])
@auth_required
def quick_search():
    params = load_args(quick_search_schema)
    return success(trainer_selection.search_trainers_for_selection(params["q"], params["limit"]))
