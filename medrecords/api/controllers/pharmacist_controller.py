from flask import jsonify, current_app
from medrecords.extensions import db
from medrecords.models import Pharmacist
from medrecords.utils.errors import ValidationError
from medrecords.utils.id_generator import allocate_identifier
from medrecords.utils.validators import (
    get_payload, require_fields, present_fields, check_pattern, AADHAAR_RE, PHONE_RE, EMAIL_RE
)
from .common import get_or_404, ensure_unique, commit_changes, load_principal_record

PHARMACIST_FIELDS = ['pharmacist_name', 'mobile_number', 'license_number', 'aadhaar_number', 'email_id']

# Column -> message for every unique pharmacist attribute
UNIQUE_FIELDS = {
    'email_id': 'Email ID already exists. Please use a different email.',
    'mobile_number': 'Mobile number already exists.',
    'license_number': 'License number already exists.',
    'aadhaar_number': 'Aadhaar number already exists.',
}


def _clean_pharmacist_fields(values):
    cleaned = dict(values)
    if 'email_id' in cleaned:
        cleaned['email_id'] = check_pattern(cleaned['email_id'], EMAIL_RE, 'email_id').lower()
    if 'mobile_number' in cleaned:
        cleaned['mobile_number'] = check_pattern(cleaned['mobile_number'], PHONE_RE, 'mobile_number (10-15 digits)')
    if 'aadhaar_number' in cleaned:
        cleaned['aadhaar_number'] = check_pattern(cleaned['aadhaar_number'], AADHAAR_RE, 'aadhaar_number (12 digits)')
    if 'license_number' in cleaned:
        cleaned['license_number'] = str(cleaned['license_number']).strip()
    return cleaned


def _check_pharmacist_uniqueness(fields, exclude=None):
    for column, message in UNIQUE_FIELDS.items():
        if column in fields:
            ensure_unique(Pharmacist, column, fields[column], message, exclude=exclude)


def get_all_pharmacists():
    pharmacists = Pharmacist.query.order_by(Pharmacist.pharmacist_name).all()
    return jsonify({'pharmacists': [p.to_dict() for p in pharmacists]}), 200


def add_pharmacist():
    data = get_payload()
    require_fields(data, PHARMACIST_FIELDS + ['password'])
    fields = _clean_pharmacist_fields(present_fields(data, PHARMACIST_FIELDS))
    _check_pharmacist_uniqueness(fields)

    pharmacist = Pharmacist(pharmacist_id=allocate_identifier(Pharmacist, 'pharmacist_id'), **fields)
    pharmacist.set_password(data['password'])

    db.session.add(pharmacist)
    commit_changes('A unique value (email, mobile, license or aadhaar) already exists.')
    current_app.logger.info(f"Pharmacist {pharmacist.pharmacist_id} created")
    return jsonify({'success': 'Pharmacist added successfully', 'pharmacist': pharmacist.to_dict()}), 201


def edit_pharmacist():
    data = get_payload()
    require_fields(data, ['pharmacist_id'])
    pharmacist = get_or_404(Pharmacist, str(data['pharmacist_id']).strip(), 'Pharmacist not found')

    updates = _clean_pharmacist_fields(present_fields(data, PHARMACIST_FIELDS))
    _check_pharmacist_uniqueness(updates, exclude=pharmacist)

    for field, value in updates.items():
        setattr(pharmacist, field, value)
    if data.get('password'):
        pharmacist.set_password(data['password'])

    commit_changes('A unique value (email, mobile, license or aadhaar) already exists.')
    return jsonify({'success': 'Pharmacist updated successfully', 'pharmacist': pharmacist.to_dict()}), 200


def delete_pharmacist(pharmacist_id):
    pharmacist = get_or_404(Pharmacist, pharmacist_id, 'Pharmacist not found')

    if pharmacist.pharmacy is not None:
        raise ValidationError(
            f'Pharmacist owns pharmacy {pharmacist.pharmacy.pharmacy_id}. Reassign or delete the pharmacy first.'
        )

    db.session.delete(pharmacist)
    commit_changes()
    return jsonify({'success': 'Pharmacist deleted successfully'}), 200


def reset_pharmacist_password():
    data = get_payload()
    require_fields(data, ['pharmacist_id', 'new_password'])
    pharmacist = get_or_404(Pharmacist, str(data['pharmacist_id']).strip(), 'Pharmacist not found')

    pharmacist.set_password(data['new_password'])
    commit_changes()
    return jsonify({'success': 'Pharmacist password reset successfully'}), 200


# --- Signed-in pharmacist ---

def get_pharmacist_dashboard():
    pharmacist = load_principal_record(Pharmacist, 'pharmacist')
    return jsonify({'pharmacist': pharmacist.to_dict()}), 200


def get_pharmacist_dashboard_data():
    """Dashboard card for the signed-in pharmacist."""
    pharmacist = load_principal_record(Pharmacist, 'pharmacist')
    return jsonify({
        'pharmacist': {
            'pharmacist_id': pharmacist.pharmacist_id,
            'name': pharmacist.pharmacist_name,
            'email': pharmacist.email_id,
            'phone': pharmacist.mobile_number,
            'license_number': pharmacist.license_number,
            'aadhaar_number': pharmacist.aadhaar_number
        }
    }), 200
