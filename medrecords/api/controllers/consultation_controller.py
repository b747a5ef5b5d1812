from flask import jsonify, current_app
from sqlalchemy.orm import joinedload
from medrecords.extensions import db
from medrecords.models import ConsultationHistory, Patient, Doctor
from medrecords.utils.errors import NotFoundError, ValidationError
from medrecords.utils.validators import get_payload, require_fields, present_fields, parse_date, is_blank
from .common import get_or_404, commit_changes

REQUIRED_FIELDS = ['medical_id', 'doctor_id', 'consultation_date', 'description', 'prescription']
EDITABLE_FIELDS = ['consultation_date', 'description', 'prescription', 'report_link']
# Older clients send the edit form as {consultation_id, date, notes}
FIELD_ALIASES = {'date': 'consultation_date', 'notes': 'description'}


def _consultation_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError('Invalid consultation_id')


def get_all_consultations():
    """Every consultation joined with its patient and doctor, newest first."""
    consultations = ConsultationHistory.query \
        .options(joinedload(ConsultationHistory.patient), joinedload(ConsultationHistory.doctor)) \
        .order_by(ConsultationHistory.consultation_date.desc(), ConsultationHistory.id.desc()).all()

    results = []
    for c in consultations:
        entry = c.to_dict(include_doctor_name=True)
        entry['patient_name'] = c.patient.name if c.patient else None
        results.append(entry)
    return jsonify({'consultations': results}), 200


def add_consultation():
    data = get_payload()
    require_fields(data, REQUIRED_FIELDS)
    medical_id = str(data['medical_id']).strip()

    if db.session.get(Patient, medical_id) is None:
        raise NotFoundError('Patient not found')
    try:
        doctor_id = int(data['doctor_id'])
    except (TypeError, ValueError):
        raise ValidationError('Invalid doctor_id')
    if db.session.get(Doctor, doctor_id) is None:
        raise NotFoundError('Doctor not found')

    consultation = ConsultationHistory(
        medical_id=medical_id,
        doctor_id=doctor_id,
        consultation_date=parse_date(data['consultation_date'], 'consultation_date'),
        description=data['description'],
        prescription=data['prescription'],
        report_link=data.get('report_link') or None
    )
    db.session.add(consultation)
    commit_changes()
    current_app.logger.info(f"Consultation {consultation.id} added for patient {medical_id}")
    return jsonify({
        'success': 'Consultation added successfully',
        'consultation': consultation.to_dict(include_doctor_name=True)
    }), 201


def edit_consultation():
    data = get_payload()
    require_fields(data, ['consultation_id'])
    consultation = get_or_404(
        ConsultationHistory, _consultation_id(data['consultation_id']), 'Consultation not found'
    )

    updates = present_fields(data, EDITABLE_FIELDS)
    for alias, field in FIELD_ALIASES.items():
        if field not in updates and not is_blank(data.get(alias)):
            updates[field] = data[alias]
    if not updates:
        raise ValidationError(
            f"Nothing to update. Provide one of: {', '.join(EDITABLE_FIELDS + list(FIELD_ALIASES))}"
        )
    if 'consultation_date' in updates:
        updates['consultation_date'] = parse_date(updates['consultation_date'], 'consultation_date')

    for field, value in updates.items():
        setattr(consultation, field, value)

    commit_changes()
    return jsonify({
        'success': 'Consultation updated successfully',
        'consultation': consultation.to_dict(include_doctor_name=True)
    }), 200


def delete_consultation(consultation_id):
    consultation = get_or_404(ConsultationHistory, consultation_id, 'Consultation not found')
    db.session.delete(consultation)
    commit_changes()
    return jsonify({'success': 'Consultation deleted successfully'}), 200
