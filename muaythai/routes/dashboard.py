# muaythai/routes/dashboard.py
from flask import Blueprint

from muaythai.services import dashboard as dashboard_service
from muaythai.utils.decorators import auth_required
from muaythai.utils.responses import success

dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("/dashboard/stats", methods=["GET"])
@auth_required
def dashboard_stats():
    return success(dashboard_service.get_dashboard_stats())


@dashboard_bp.route("/dashboard/trainers-by-province", methods=["GET"])
@auth_required
def trainers_by_province():
    return success(dashboard_service.get_trainer_counts_by_province())


@dashboard_bp.route("/dashboard/gyms-by-province", methods=["GET"])
@auth_required
def gyms_by_province():
    return success(dashboard_service.get_gym_counts_by_province())
