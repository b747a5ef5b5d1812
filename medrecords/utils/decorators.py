from functools import wraps
from flask import request, current_app, make_response
from sqlalchemy.exc import SQLAlchemyError
from medrecords.extensions import db
from medrecords.models.system_models import AuditLog
from medrecords.utils.errors import UnauthorizedError
from medrecords.utils.session_util import current_principal, SIGNIN_PATHS


def role_required(*roles):
    """Admits the request only when the session principal holds one of ``roles``."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            principal = current_principal()
            if principal is None or principal.role not in roles:
                label = ' or '.join(roles)
                raise UnauthorizedError(
                    f"Access denied. {label.capitalize()} privileges required.",
                    signin=SIGNIN_PATHS[roles[0]]
                )
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def _write_audit_entry(action, resource, resource_id, success, details):
    principal = current_principal()
    log_entry = AuditLog(
        actor_role=principal.role if principal else None,
        actor_id=principal.id if principal else None,
        action=action,
        resource=resource,
        resource_id=resource_id,
        ip_address=request.remote_addr,
        user_agent=request.headers.get('User-Agent'),
        success=success,
        details=details
    )
    try:
        db.session.add(log_entry)
        db.session.commit()
    except SQLAlchemyError as db_error:
        current_app.audit_logger.error(f"Failed to log audit entry due to DB error: {db_error}")
        db.session.rollback()

    current_app.audit_logger.info(
        f"Action='{action}', Resource='{resource}', ResourceID='{resource_id}', "
        f"Actor='{log_entry.actor_role}:{log_entry.actor_id}', Success='{success}', Details='{details}'"
    )


def audit_log(action, resource):
    """Records every call of the decorated view, successful or not."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            # Route arguments name the record acted upon, e.g. /delete_doctor/<doctor_id>
            resource_id = str(next(iter(kwargs.values()))) if kwargs else None

            try:
                raw_response = f(*args, **kwargs)
            except Exception as e:
                db.session.rollback()
                _write_audit_entry(action, resource, resource_id, False, f"An error occurred: {e}")
                raise

            response = make_response(raw_response)
            success = response.status_code < 400
            _write_audit_entry(
                action, resource, resource_id, success,
                f"Request completed. Status: {response.status_code}"
            )
            return response

        return decorated_function
    return decorator
