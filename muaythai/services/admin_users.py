# muaythai/services/admin_users.py
import logging

from flask import current_app
from sqlalchemy import func

from muaythai.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from muaythai.extensions import db
from muaythai.models import AdminUser
from muaythai.models.admin_user import hash_password, verify_password
from muaythai.utils.time import utcnow

logger = logging.getLogger(__name__)

_dummy_hash = None


def _rounds():
    return current_app.config.get("BCRYPT_ROUNDS", 12)


def _max_users():
    return current_app.config.get("MAX_ADMIN_USERS", 3)


def _verify_dummy(password):
    """Burn a bcrypt check so unknown emails take as long as wrong passwords."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("not-a-real-password", _rounds())
    verify_password(password, _dummy_hash)


def _email_taken(email, exclude_id=None):
    query = AdminUser.query.filter(func.lower(AdminUser.email) == email.lower())
    if exclude_id is not None:
        query = query.filter(AdminUser.id != exclude_id)
    return query.first() is not None


# ================================
# Queries
# ================================

def get_all_admin_users():
    return AdminUser.query.order_by(AdminUser.created_at.asc()).all()


def get_admin_user_by_id(user_id):
    user = db.session.get(AdminUser, user_id)
    if user is None:
        raise NotFoundError("Admin user", user_id)
    return user


def get_admin_user_by_email(email):
    return AdminUser.query.filter(func.lower(AdminUser.email) == email.strip().lower()).first()


def get_admin_count():
    """Number of active admins (staff excluded)."""
    return AdminUser.query.filter_by(role="admin", is_active=True).count()


def get_total_user_count():
    return AdminUser.query.count()


# ================================
# Mutations
# ================================

def create_admin_user(email, password, role="staff"):
    if _email_taken(email):
        raise ConflictError("Email already exists")
    max_users = _max_users()
    if get_total_user_count() >= max_users:
        logger.warning("Refused to create admin user %s: limit of %s reached", email, max_users)
        raise ValidationError(f"Maximum {max_users} users allowed")

    user = AdminUser(email=email.strip().lower(), role=role, is_active=True)
    user.set_password(password, _rounds())
    db.session.add(user)
    db.session.commit()
    logger.info("Created %s user %s", user.role, user.email)
    return user


def update_admin_user(user_id, data):
    user = get_admin_user_by_id(user_id)

    if "email" in data and _email_taken(data["email"], exclude_id=user.id):
        raise ConflictError("Email already exists")

    loses_admin = user.is_admin and user.is_active and (
        data.get("role", user.role) != "admin" or data.get("is_active", True) is False
    )
    if loses_admin and get_admin_count() <= 1:
        raise ValidationError("At least one active admin must remain")

    if "email" in data:
        user.email = data["email"].strip().lower()
    if "role" in data:
        user.role = data["role"]
    if "is_active" in data:
        user.is_active = data["is_active"]
    if data.get("password"):
        user.set_password(data["password"], _rounds())
    user.updated_at = utcnow()
    db.session.commit()
    logger.info("Updated admin user %s", user.id)
    return user


def delete_admin_user(user_id):
    user = get_admin_user_by_id(user_id)
    if user.is_admin and user.is_active and get_admin_count() <= 1:
        raise ValidationError("Cannot delete the last admin user")
    db.session.delete(user)
    db.session.commit()
    logger.info("Deleted admin user %s", user_id)
    return True


def authenticate_admin_user(email, password):
    """Return the user for valid credentials, ``None`` otherwise."""
    if not email or not password:
        return None
    user = get_admin_user_by_email(email)
    if user is None:
        _verify_dummy(password)
        return None
    if not user.check_password(password):
        logger.warning("Failed login for %s", user.email)
        return None
    if not user.is_active:
        raise ForbiddenError("Account is inactive")
    return user
