# muaythai/routes/admin_users.py
from flask import Blueprint, current_app
from flask_jwt_extended import current_user, decode_token, get_jwt, jwt_required
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from muaythai.errors import UnauthorizedError, ValidationError
from muaythai.extensions import limiter
from muaythai.schemas.admin_user import (
    AdminUserCreateSchema,
    AdminUserUpdateSchema,
    LoginSchema,
    LogoutSchema,
)
from muaythai.services import admin_users as admin_user_service
from muaythai.services import auth as auth_service
from muaythai.utils.decorators import admin_required
from muaythai.utils.request import load_json
from muaythai.utils.responses import success

admin_users_bp = Blueprint("admin_users", __name__)

create_schema = AdminUserCreateSchema()
update_schema = AdminUserUpdateSchema()
login_schema = LoginSchema()
logout_schema = LogoutSchema()


def login_limit():
    return current_app.config["LOGIN_RATE_LIMIT"]


def admin_action_limit():
    return current_app.config["ADMIN_RATE_LIMIT"]


# ================================
# Session
# ================================

@admin_users_bp.route("/admin-users/login", methods=["POST"])
@limiter.limit(login_limit)
def login():
    data = load_json(login_schema)
    user = admin_user_service.authenticate_admin_user(data["email"], data["password"])
    if user is None:
        raise UnauthorizedError("Invalid email or password")
    return success({"user": user.to_dict(), **auth_service.issue_tokens(user)}, "Login successful")


@admin_users_bp.route("/admin-users/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    user = current_user
    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")
    tokens = auth_service.refresh_access_token(user, get_jwt().get("sid"))
    return success(tokens, "Token refreshed")


@admin_users_bp.route("/admin-users/logout", methods=["POST"])
@jwt_required()
def logout():
    data = load_json(logout_schema)
    if data.get("refresh_token"):
        try:
            refresh_payload = decode_token(data["refresh_token"])
        except (JWTExtendedException, PyJWTError):
            raise ValidationError("Invalid refresh token") from None
        if refresh_payload.get("type") != "refresh" or refresh_payload.get("sub") != get_jwt()["sub"]:
            raise ValidationError("Invalid refresh token")
        auth_service.revoke_token(refresh_payload)
    auth_service.revoke_token(get_jwt())
    return success(message="Logged out successfully")


@admin_users_bp.route("/admin-users/me", methods=["GET"])
@jwt_required()
def me():
    user = current_user
    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")
    return success(user.to_dict())


# ================================
# Management (admins only)
# ================================

@admin_users_bp.route("/admin-users", methods=["GET"])
@admin_required
def list_admin_users():
    users = admin_user_service.get_all_admin_users()
    return success([user.to_dict() for user in users])


@admin_users_bp.route("/admin-users/stats/count", methods=["GET"])
@admin_required
def admin_user_counts():
    return success({
        "total": admin_user_service.get_total_user_count(),
        "activeAdmins": admin_user_service.get_admin_count(),
        "maxUsers": current_app.config["MAX_ADMIN_USERS"],
    })


@admin_users_bp.route("/admin-users/<uuid:user_id>", methods=["GET"])
@admin_required
def get_admin_user(user_id):
    return success(admin_user_service.get_admin_user_by_id(user_id).to_dict())


@admin_users_bp.route("/admin-users", methods=["POST"])
@limiter.limit(admin_action_limit)
@admin_required
def create_admin_user():
    data = load_json(create_schema)
    user = admin_user_service.create_admin_user(data["email"], data["password"], data["role"])
    return success(user.to_dict(), "User created successfully", 201)


@admin_users_bp.route("/admin-users/<uuid:user_id>", methods=["PUT"])
@limiter.limit(admin_action_limit)
@admin_required
def update_admin_user(user_id):
    data = load_json(update_schema)
    user = admin_user_service.update_admin_user(user_id, data)
    return success(user.to_dict(), "User updated successfully")


@admin_users_bp.route("/admin-users/<uuid:user_id>", methods=["DELETE"])
@limiter.limit(admin_action_limit)
@admin_required
def delete_admin_user(user_id):
    admin_user_service.delete_admin_user(user_id)
    return success(message="User deleted successfully")
