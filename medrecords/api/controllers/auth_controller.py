from flask import jsonify, current_app
from medrecords.extensions import db
from medrecords.models import Administrator, Patient, Doctor, Pharmacy, Pharmacist
from medrecords.utils.errors import AuthenticationError, UnauthorizedError, ValidationError
from medrecords.utils.session_util import (
    establish_principal, current_principal, clear_principal, SIGNIN_PATHS
)
from medrecords.utils.validators import get_payload, is_blank
from .patient_controller import create_patient


def _credentials(data, id_field):
    """Pulls ``id_field`` and ``password`` out of a sign-in form."""
    identifier = data.get(id_field)
    password = data.get('password')
    if is_blank(identifier) or is_blank(password):
        clear_principal()
        raise ValidationError(f'{id_field} and password required', fields=[id_field, 'password'])
    return str(identifier).strip(), str(password)


def _authenticate(record, password, role):
    """Establishes the principal for ``record`` or fails without leaving a session behind."""
    if record is None or not record.check_password(password):
        clear_principal()
        current_app.logger.warning(f"Failed {role} sign-in")
        raise AuthenticationError('Invalid credentials')


def _doctor_pk(identifier):
    """Doctor IDs are plain integers; anything else cannot match an account."""
    if identifier.isascii() and identifier.isdigit() and len(identifier) <= 18:
        return int(identifier)
    return None


def admin_login():
    data = get_payload()
    username, password = _credentials(data, 'username')

    admin = Administrator.query.filter_by(username=username).first()
    _authenticate(admin, password, 'admin')

    establish_principal('admin', admin.id)
    return jsonify({'success': 'Signed in', 'admin': admin.to_dict()}), 200


def patient_signup():
    """Self-registration; the new medical ID is the patient's sign-in identifier."""
    data = get_payload()
    if is_blank(data.get('password')):
        raise ValidationError('Missing required fields: password', fields=['password'])

    patient = create_patient(data, str(data['password']))
    return jsonify({
        'success': 'Signup successful. Use your medical ID to sign in.',
        'medical_id': patient.medical_id
    }), 201


def patient_signin():
    data = get_payload()
    identifier, password = _credentials(data, 'identifier')

    patient = db.session.get(Patient, identifier)
    _authenticate(patient, password, 'patient')

    establish_principal('patient', patient.medical_id)
    return jsonify({'success': 'Signed in', 'medical_id': patient.medical_id}), 200


def doctor_signin():
    data = get_payload()
    identifier, password = _credentials(data, 'doctor_id')

    doctor_id = _doctor_pk(identifier)
    doctor = db.session.get(Doctor, doctor_id) if doctor_id is not None else None
    _authenticate(doctor, password, 'doctor')
    if not doctor.is_active:
        clear_principal()
        raise UnauthorizedError('Account deactivated', signin=SIGNIN_PATHS['doctor'])

    establish_principal('doctor', doctor.doctor_id)
    return jsonify({'success': 'Signed in', 'doctor': doctor.to_dict()}), 200


def pharmacy_signin():
    data = get_payload()
    identifier, password = _credentials(data, 'shop_id')

    pharmacy = db.session.get(Pharmacy, identifier)
    _authenticate(pharmacy, password, 'pharmacy')

    establish_principal('pharmacy', pharmacy.pharmacy_id)
    return jsonify({'success': 'Signed in', 'pharmacy': pharmacy.to_dict()}), 200


def pharmacist_signin():
    data = get_payload()
    identifier, password = _credentials(data, 'pharmacist_id')

    pharmacist = db.session.get(Pharmacist, identifier)
    _authenticate(pharmacist, password, 'pharmacist')

    establish_principal('pharmacist', pharmacist.pharmacist_id)
    return jsonify({'success': 'Signed in', 'pharmacist': pharmacist.to_dict()}), 200


def logout():
    clear_principal()
    return jsonify({'success': 'Signed out'}), 200


def current_session():
    principal = current_principal()
    return jsonify({'principal': principal.to_dict() if principal else None}), 200
