from flask import jsonify, current_app
from medrecords.extensions import db
from medrecords.models import Pharmacy, Pharmacist, ConsultationHistory
from medrecords.utils.errors import NotFoundError, UniquenessViolation
from medrecords.utils.id_generator import allocate_identifier
from medrecords.utils.validators import get_payload, require_fields, present_fields
from .common import get_or_404, commit_changes, load_principal_record

PHARMACY_FIELDS = ['pharmacy_name', 'location', 'pharmacist_id']


def _check_pharmacist_assignment(pharmacist_id, pharmacy=None):
    """The pharmacist must exist and must not already own another pharmacy."""
    pharmacist = db.session.get(Pharmacist, pharmacist_id)
    if pharmacist is None:
        raise NotFoundError('Pharmacist not found')
    if pharmacist.pharmacy is not None and pharmacist.pharmacy is not pharmacy:
        raise UniquenessViolation('Pharmacist already manages another pharmacy.')


def get_all_pharmacies():
    pharmacies = Pharmacy.query.order_by(Pharmacy.pharmacy_name).all()
    return jsonify({'pharmacies': [p.to_dict() for p in pharmacies]}), 200


def add_pharmacy():
    data = get_payload()
    require_fields(data, PHARMACY_FIELDS + ['password'])
    fields = {k: str(v).strip() for k, v in present_fields(data, PHARMACY_FIELDS).items()}
    _check_pharmacist_assignment(fields['pharmacist_id'])

    pharmacy = Pharmacy(pharmacy_id=allocate_identifier(Pharmacy, 'pharmacy_id'), **fields)
    pharmacy.set_password(data['password'])

    db.session.add(pharmacy)
    commit_changes('Pharmacist already manages another pharmacy.')
    current_app.logger.info(f"Pharmacy {pharmacy.pharmacy_id} created for pharmacist {pharmacy.pharmacist_id}")
    return jsonify({'success': 'Pharmacy added successfully', 'pharmacy': pharmacy.to_dict()}), 201


def edit_pharmacy():
    data = get_payload()
    require_fields(data, ['pharmacy_id'])
    pharmacy = get_or_404(Pharmacy, str(data['pharmacy_id']).strip(), 'Pharmacy not found')

    updates = {k: str(v).strip() for k, v in present_fields(data, PHARMACY_FIELDS).items()}
    if 'pharmacist_id' in updates:
        _check_pharmacist_assignment(updates['pharmacist_id'], pharmacy=pharmacy)

    for field, value in updates.items():
        setattr(pharmacy, field, value)
    if data.get('password'):
        pharmacy.set_password(data['password'])

    commit_changes('Pharmacist already manages another pharmacy.')
    return jsonify({'success': 'Pharmacy updated successfully', 'pharmacy': pharmacy.to_dict()}), 200


def delete_pharmacy(pharmacy_id):
    pharmacy = get_or_404(Pharmacy, pharmacy_id, 'Pharmacy not found')
    db.session.delete(pharmacy)
    commit_changes()
    return jsonify({'success': 'Pharmacy deleted successfully'}), 200


def reset_pharmacy_password(pharmacy_id):
    data = get_payload()
    require_fields(data, ['password'])
    pharmacy = get_or_404(Pharmacy, pharmacy_id, 'Pharmacy not found')

    pharmacy.set_password(data['password'])
    commit_changes()
    return jsonify({'success': 'Password reset successfully'}), 200


# --- Signed-in pharmacy ---

def get_pharmacy_dashboard():
    pharmacy = load_principal_record(Pharmacy, 'pharmacy')
    return jsonify({'pharmacy': pharmacy.to_dict()}), 200


def get_pharmacy_dashboard_data():
    """Consultation history (prescriptions) for a patient presenting at the counter."""
    load_principal_record(Pharmacy, 'pharmacy')
    data = get_payload()
    require_fields(data, ['patient_medical_id'])
    medical_id = str(data['patient_medical_id']).strip()

    history = ConsultationHistory.query.filter_by(medical_id=medical_id) \
        .order_by(ConsultationHistory.consultation_date.desc(), ConsultationHistory.id.desc()).all()

    return jsonify({'patientHistory': [h.to_dict() for h in history]}), 200
