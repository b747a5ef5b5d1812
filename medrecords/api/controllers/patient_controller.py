from flask import request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from medrecords.extensions import db
from medrecords.models import Patient, ConsultationHistory, MedicalHistory, GENDERS, BLOOD_GROUPS
from medrecords.utils.errors import InternalError
from medrecords.utils.id_generator import allocate_identifier
from medrecords.utils.validators import (
    get_payload, require_fields, present_fields, check_pattern, check_choice, parse_date,
    AADHAAR_RE, MOBILE_RE
)
from .common import (
    generate_random_password, get_or_404, ensure_unique, commit_changes, load_principal_record
)

PATIENT_FIELDS = [
    'name', 'aadhaar_number', 'mobile_number', 'date_of_birth',
    'gender', 'blood_group', 'address'
]
EDITABLE_FIELDS = PATIENT_FIELDS + ['report_link_text']


def _clean_patient_fields(values):
    """Validates and normalizes whichever patient fields are present."""
    cleaned = dict(values)
    if 'name' in cleaned:
        cleaned['name'] = str(cleaned['name']).strip()
    if 'aadhaar_number' in cleaned:
        cleaned['aadhaar_number'] = check_pattern(cleaned['aadhaar_number'], AADHAAR_RE, 'aadhaar_number (12 digits)')
    if 'mobile_number' in cleaned:
        cleaned['mobile_number'] = check_pattern(cleaned['mobile_number'], MOBILE_RE, 'mobile_number (10 digits)')
    if 'date_of_birth' in cleaned:
        cleaned['date_of_birth'] = parse_date(cleaned['date_of_birth'], 'date_of_birth')
    if 'gender' in cleaned:
        cleaned['gender'] = check_choice(cleaned['gender'], GENDERS, 'gender')
    if 'blood_group' in cleaned:
        cleaned['blood_group'] = check_choice(cleaned['blood_group'], BLOOD_GROUPS, 'blood_group')
    return cleaned


def create_patient(data, password):
    """Validates ``data``, allocates a medical ID and persists a new patient."""
    require_fields(data, PATIENT_FIELDS)
    fields = _clean_patient_fields(present_fields(data, EDITABLE_FIELDS))

    ensure_unique(Patient, 'aadhaar_number', fields['aadhaar_number'],
                  'Aadhaar number already registered.')

    medical_id = allocate_identifier(Patient, 'medical_id')
    patient = Patient(medical_id=medical_id, **fields)
    patient.set_password(password)

    db.session.add(patient)
    commit_changes('Aadhaar number already registered.')
    current_app.logger.info(f"Patient {medical_id} created")
    return patient


def get_all_patients():
    patients = Patient.query.order_by(Patient.name).all()
    return jsonify({'patients': [p.to_dict() for p in patients]}), 200


def add_patient():
    """Admin creates a patient; the default password applies when none is given."""
    data = get_payload()
    password = data.get('password') or current_app.config['DEFAULT_PATIENT_PASSWORD']
    patient = create_patient(data, password)
    return jsonify({'success': 'Patient added successfully', 'patient': patient.to_dict()}), 201


def edit_patient():
    data = get_payload()
    require_fields(data, ['medical_id'])
    patient = get_or_404(Patient, str(data['medical_id']).strip(), 'Patient not found')

    updates = _clean_patient_fields(present_fields(data, EDITABLE_FIELDS))
    if 'aadhaar_number' in updates:
        ensure_unique(Patient, 'aadhaar_number', updates['aadhaar_number'],
                      'Aadhaar number already registered.', exclude=patient)

    for field, value in updates.items():
        setattr(patient, field, value)

    commit_changes('Aadhaar number already registered.')
    return jsonify({'success': 'Patient updated successfully', 'patient': patient.to_dict()}), 200


def delete_patient():
    """Deletes a patient together with its history rows in one transaction."""
    medical_id = request.args.get('medical_id') or get_payload().get('medical_id')
    require_fields({'medical_id': medical_id}, ['medical_id'])
    patient = get_or_404(Patient, str(medical_id).strip(), 'Patient not found')

    history_count = len(patient.consultations)
    try:
        db.session.delete(patient)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Failed to delete patient {medical_id}: {e}")
        raise InternalError(str(e))

    current_app.logger.info(
        f"Patient {medical_id} deleted with {history_count} consultation records"
    )
    return jsonify({'success': 'Patient deleted successfully'}), 200


def reset_patient_password():
    data = get_payload()
    require_fields(data, ['medical_id'])
    patient = get_or_404(Patient, str(data['medical_id']).strip(), 'Patient not found')

    new_password = generate_random_password()
    patient.set_password(new_password)
    commit_changes()
    return jsonify({
        'success': f'Password reset successful. New password: {new_password}',
        'medical_id': patient.medical_id,
        'new_password': new_password
    }), 200


def get_patient_data():
    """Signed-in patient's own profile plus consultation and medical history."""
    patient = load_principal_record(Patient, 'patient')

    consultations = ConsultationHistory.query.filter_by(medical_id=patient.medical_id) \
        .order_by(ConsultationHistory.consultation_date.desc(), ConsultationHistory.id.desc()).all()
    medical_history = MedicalHistory.query.filter_by(medical_id=patient.medical_id) \
        .order_by(MedicalHistory.updated_at.desc()).all()

    return jsonify({
        'patient': patient.to_dict(),
        'consultationHistory': [c.to_dict() for c in consultations],
        'medicalHistory': [m.to_dict() for m in medical_history]
    }), 200
