# /medrecords/utils/session_util.py
"""Principal bookkeeping on top of the server-side session store.

The cookie only carries an opaque session id; the principal itself lives in
the Flask-Session backend, so clearing it revokes the session for good.

Every role signs in through ``establish_principal`` and is checked by the
same ``role_required`` guard, so the session only ever holds one key.
"""
from typing import NamedTuple, Optional
from flask import session, current_app

ROLES = ('admin', 'doctor', 'pharmacy', 'pharmacist', 'patient')

SIGNIN_PATHS = {
    'admin': '/admin/login',
    'doctor': '/doctor_signin',
    'pharmacy': '/pharmacy_signin',
    'pharmacist': '/pharmacist_signin',
    'patient': '/patient_signin',
}

SESSION_KEY = 'principal'


class Principal(NamedTuple):
    role: str
    id: str

    def to_dict(self):
        return {'role': self.role, 'id': self.id}


def establish_principal(role: str, identifier) -> Principal:
    """Starts a fresh session for an authenticated actor."""
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}")
    principal = Principal(role, str(identifier))
    # New session id on every sign-in; the old id is dropped from the store
    current_app.session_interface.regenerate(session)
    session.clear()
    session.permanent = True
    session[SESSION_KEY] = principal.to_dict()
    return principal


def current_principal() -> Optional[Principal]:
    data = session.get(SESSION_KEY)
    if not isinstance(data, dict) or data.get('role') not in ROLES or not data.get('id'):
        return None
    return Principal(data['role'], data['id'])


def clear_principal() -> None:
    session.clear()
