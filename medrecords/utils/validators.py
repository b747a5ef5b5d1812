# /medrecords/utils/validators.py
import re
from datetime import datetime, date
from flask import request
from medrecords.utils.errors import ValidationError

MEDICAL_ID_RE = re.compile(r'^\d{12}$')
AADHAAR_RE = re.compile(r'^\d{12}$')
MOBILE_RE = re.compile(r'^\d{10}$')
PHONE_RE = re.compile(r'^\d{10,15}$')
EMAIL_RE = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def get_payload() -> dict:
    """Returns the request body as a dict, accepting JSON or form-encoded bodies."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: dict, fields) -> None:
    """Raises ValidationError naming every required field that is missing or blank."""
    missing = [field for field in fields if is_blank(data.get(field))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", fields=missing)


def present_fields(data: dict, fields) -> dict:
    """Picks the fields the client actually sent; blank values mean "leave unchanged"."""
    return {field: data[field] for field in fields if not is_blank(data.get(field))}


def check_pattern(value, pattern, label: str) -> str:
    value = str(value).strip()
    if not pattern.match(value):
        raise ValidationError(f"Invalid {label}")
    return value


def check_choice(value, choices, label: str) -> str:
    if value not in choices:
        raise ValidationError(f"Invalid {label}. Expected one of: {', '.join(choices)}")
    return value


def parse_date(value, label: str) -> date:
    """Parses an ISO ``YYYY-MM-DD`` date."""
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), '%Y-%m-%d').date()
    except ValueError:
        raise ValidationError(f"Invalid {label}. Expected YYYY-MM-DD")
