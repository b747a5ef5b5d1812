from datetime import date
from medrecords.extensions import db
from medrecords.models.user_models import TimestampMixin


class ConsultationHistory(TimestampMixin, db.Model):
    """A single doctor consultation recorded against a patient."""
    __tablename__ = 'patient_consultation_history'

    id = db.Column(db.Integer, primary_key=True)
    medical_id = db.Column(
        db.String(12), db.ForeignKey('patients.medical_id', ondelete='CASCADE'), nullable=False, index=True
    )
    doctor_id = db.Column(db.Integer, db.ForeignKey('doctors.doctor_id'), nullable=False, index=True)
    consultation_date = db.Column(db.Date, nullable=False, default=date.today)
    description = db.Column(db.Text)
    prescription = db.Column(db.Text)
    report_link = db.Column(db.String(255))

    patient = db.relationship('Patient', back_populates='consultations')
    doctor = db.relationship('Doctor', back_populates='consultations')

    def to_dict(self, include_doctor_name=False):
        data = {
            'id': self.id,
            'medical_id': self.medical_id,
            'doctor_id': self.doctor_id,
            'consultation_date': self.consultation_date.isoformat() if self.consultation_date else None,
            'description': self.description,
            'prescription': self.prescription,
            'report_link': self.report_link,
        }
        if include_doctor_name:
            data['doctor_name'] = self.doctor.name if self.doctor else None
        return data


class MedicalHistory(TimestampMixin, db.Model):
    """Long-lived medical background of a patient, as recorded by a doctor."""
    __tablename__ = 'patient_medical_history'

    id = db.Column(db.Integer, primary_key=True)
    medical_id = db.Column(
        db.String(12), db.ForeignKey('patients.medical_id', ondelete='CASCADE'), nullable=False, index=True
    )
    doctor_id = db.Column(db.Integer, db.ForeignKey('doctors.doctor_id'), nullable=False)
    known_allergies = db.Column(db.Text)
    chronic_diseases = db.Column(db.Text)
    past_surgeries = db.Column(db.Text)
    previous_hospitalizations = db.Column(db.Text)
    family_medical_history = db.Column(db.Text)

    patient = db.relationship('Patient', back_populates='medical_histories')
    doctor = db.relationship('Doctor', back_populates='medical_histories')

    def to_dict(self):
        return {
            'id': self.id,
            'medical_id': self.medical_id,
            'doctor_id': self.doctor_id,
            'known_allergies': self.known_allergies,
            'chronic_diseases': self.chronic_diseases,
            'past_surgeries': self.past_surgeries,
            'previous_hospitalizations': self.previous_hospitalizations,
            'family_medical_history': self.family_medical_history,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
