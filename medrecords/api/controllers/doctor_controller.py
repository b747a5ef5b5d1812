from datetime import date
from flask import jsonify, current_app
from sqlalchemy.orm import joinedload
from medrecords.extensions import db
from medrecords.models import Doctor, Patient, ConsultationHistory, MedicalHistory, GENDERS, DOCTOR_STATUSES
from medrecords.utils.errors import ValidationError, NotFoundError, UnauthorizedError
from medrecords.utils.validators import (
    get_payload, require_fields, present_fields, check_pattern, check_choice, parse_date,
    PHONE_RE, EMAIL_RE
)
from medrecords.utils.session_util import clear_principal, SIGNIN_PATHS
from .common import get_or_404, ensure_unique, commit_changes, load_principal_record

DOCTOR_FIELDS = [
    'name', 'specialization', 'email', 'phone_number', 'address',
    'gender', 'date_of_birth', 'license_number', 'status'
]
REQUIRED_FIELDS = [
    'name', 'specialization', 'password', 'email', 'phone_number',
    'gender', 'date_of_birth', 'license_number'
]


def _clean_doctor_fields(values):
    cleaned = dict(values)
    if 'email' in cleaned:
        cleaned['email'] = check_pattern(cleaned['email'], EMAIL_RE, 'email').lower()
    if 'phone_number' in cleaned:
        cleaned['phone_number'] = check_pattern(cleaned['phone_number'], PHONE_RE, 'phone_number (10-15 digits)')
    if 'gender' in cleaned:
        cleaned['gender'] = check_choice(cleaned['gender'], GENDERS, 'gender')
    if 'status' in cleaned:
        cleaned['status'] = check_choice(cleaned['status'], DOCTOR_STATUSES, 'status')
    if 'date_of_birth' in cleaned:
        cleaned['date_of_birth'] = parse_date(cleaned['date_of_birth'], 'date_of_birth')
    if 'license_number' in cleaned:
        cleaned['license_number'] = str(cleaned['license_number']).strip()
    return cleaned


def _check_doctor_uniqueness(fields, exclude=None):
    if 'email' in fields:
        ensure_unique(Doctor, 'email', fields['email'], 'Email already exists.', exclude=exclude)
    if 'license_number' in fields:
        ensure_unique(Doctor, 'license_number', fields['license_number'],
                      'License number already exists.', exclude=exclude)


def _doctor_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError('Invalid doctor_id')


def get_all_doctors():
    doctors = Doctor.query.order_by(Doctor.doctor_id).all()
    return jsonify({'doctors': [d.to_dict() for d in doctors]}), 200


def add_doctor():
    data = get_payload()
    require_fields(data, REQUIRED_FIELDS)
    fields = _clean_doctor_fields(present_fields(data, DOCTOR_FIELDS))
    _check_doctor_uniqueness(fields)

    doctor = Doctor(**fields)
    doctor.set_password(data['password'])

    db.session.add(doctor)
    commit_changes('A unique value (email or license number) already exists.')
    current_app.logger.info(f"Doctor {doctor.doctor_id} created")
    return jsonify({'success': 'Doctor added successfully', 'doctor': doctor.to_dict()}), 201


def edit_doctor():
    """Merges the supplied fields over the stored doctor; omitted fields are kept."""
    data = get_payload()
    require_fields(data, ['doctor_id'])
    doctor = get_or_404(Doctor, _doctor_id(data['doctor_id']), 'Doctor not found')

    updates = _clean_doctor_fields(present_fields(data, DOCTOR_FIELDS))
    _check_doctor_uniqueness(updates, exclude=doctor)

    for field, value in updates.items():
        setattr(doctor, field, value)
    if data.get('password'):
        doctor.set_password(data['password'])

    commit_changes('A unique value (email or license number) already exists.')
    return jsonify({'success': 'Doctor updated successfully', 'doctor': doctor.to_dict()}), 200


def delete_doctor(doctor_id):
    doctor = get_or_404(Doctor, doctor_id, 'Doctor not found')

    if doctor.consultations.count() or doctor.medical_histories.count():
        raise ValidationError(
            'Doctor has patient history records and cannot be deleted. Set the status to Inactive instead.'
        )

    db.session.delete(doctor)
    commit_changes()
    return jsonify({'success': 'Doctor deleted successfully'}), 200


def reset_doctor_password():
    data = get_payload()
    require_fields(data, ['doctor_id', 'new_password'])
    doctor = get_or_404(Doctor, _doctor_id(data['doctor_id']), 'Doctor not found')

    doctor.set_password(data['new_password'])
    commit_changes()
    return jsonify({'success': 'Doctor password reset successfully'}), 200


# --- Signed-in doctor ---

def _current_doctor():
    doctor = load_principal_record(Doctor, 'doctor', cast=int)
    if not doctor.is_active:
        clear_principal()
        raise UnauthorizedError('Account deactivated', signin=SIGNIN_PATHS['doctor'])
    return doctor


def get_doctor_dashboard():
    doctor = _current_doctor()
    return jsonify({'doctor': doctor.to_dict()}), 200


def search_patient():
    """Looks a patient up by medical ID and returns their consultation history."""
    _current_doctor()
    data = get_payload()
    require_fields(data, ['medical_id'])
    medical_id = str(data['medical_id']).strip()

    patient = db.session.get(Patient, medical_id)
    if patient is None:
        raise NotFoundError('Patient not found. Please check the medical ID.')

    consultations = ConsultationHistory.query.filter_by(medical_id=medical_id) \
        .order_by(ConsultationHistory.consultation_date.desc(), ConsultationHistory.id.desc()).all()
    medical_history = MedicalHistory.query.filter_by(medical_id=medical_id) \
        .order_by(MedicalHistory.updated_at.desc()).all()

    if consultations:
        message = f'Found {len(consultations)} records for patient {medical_id}'
    else:
        message = f'No consultation records found for patient {medical_id}'

    return jsonify({
        'success': message,
        'patient': {
            'medical_id': patient.medical_id,
            'name': patient.name,
            'gender': patient.gender,
            'blood_group': patient.blood_group,
            'date_of_birth': patient.date_of_birth.isoformat(),
        },
        'consultationHistory': [c.to_dict() for c in consultations],
        'medicalHistory': [m.to_dict() for m in medical_history]
    }), 200


def add_consultation_record():
    """Records a consultation by the signed-in doctor, dated today."""
    doctor = _current_doctor()
    data = get_payload()
    require_fields(data, ['patient_medical_id', 'description'])
    medical_id = str(data['patient_medical_id']).strip()

    if db.session.get(Patient, medical_id) is None:
        raise NotFoundError('Patient not found. Please check the medical ID.')

    consultation = ConsultationHistory(
        medical_id=medical_id,
        doctor_id=doctor.doctor_id,
        consultation_date=date.today(),
        description=data.get('description'),
        prescription=data.get('prescription'),
        report_link=data.get('report_link')
    )
    db.session.add(consultation)
    commit_changes()
    current_app.logger.info(f"Doctor {doctor.doctor_id} added consultation {consultation.id} for {medical_id}")
    return jsonify({
        'success': 'Consultation record added successfully!',
        'consultation': consultation.to_dict()
    }), 201


def view_patient_consultation_history():
    _current_doctor()
    data = get_payload()
    require_fields(data, ['medical_id'])
    medical_id = str(data['medical_id']).strip()

    consultations = ConsultationHistory.query.filter_by(medical_id=medical_id) \
        .options(joinedload(ConsultationHistory.doctor)) \
        .order_by(ConsultationHistory.consultation_date.desc(), ConsultationHistory.id.desc()).all()

    return jsonify({
        'consultationHistory': [c.to_dict(include_doctor_name=True) for c in consultations]
    }), 200

