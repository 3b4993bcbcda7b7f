# muaythai/utils/decorators.py
from functools import wraps

from flask_jwt_extended import current_user, jwt_required

from muaythai.errors import ForbiddenError, UnauthorizedError


def role_required(*roles):
    """
    Require a valid access token whose admin user still exists, is active,
    and has one of ``roles`` (any role when none are given).
    """
    def decorator(view_func):
        @wraps(view_func)
        @jwt_required()
        def wrapper(*args, **kwargs):
            user = current_user
            if user is None or not user.is_active:
                raise UnauthorizedError("User not found or inactive")
            if roles and user.role not in roles:
                raise ForbiddenError("Insufficient permissions")
            return view_func(*args, **kwargs)
        return wrapper
    return decorator


auth_required = role_required("admin", "staff")
admin_required = role_required("admin")
