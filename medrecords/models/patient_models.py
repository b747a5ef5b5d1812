from medrecords.extensions import db
from medrecords.models.user_models import CredentialMixin, TimestampMixin, GENDERS

BLOOD_GROUPS = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')


class Patient(CredentialMixin, TimestampMixin, db.Model):
    """Patient record; the medical_id doubles as the sign-in identifier."""
    __tablename__ = 'patients'

    medical_id = db.Column(db.String(12), primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    aadhaar_number = db.Column(db.String(12), unique=True, nullable=False)
    mobile_number = db.Column(db.String(10), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)
    gender = db.Column(db.Enum(*GENDERS, name='patient_gender'), nullable=False)
    blood_group = db.Column(db.Enum(*BLOOD_GROUPS, name='patient_blood_group'), nullable=False)
    address = db.Column(db.Text, nullable=False)
    report_link_text = db.Column(db.Text)

    # --- Relationships ---
    # History rows go with the patient inside the same unit of work.
    consultations = db.relationship(
        'ConsultationHistory',
        back_populates='patient',
        cascade='all, delete-orphan'
    )
    medical_histories = db.relationship(
        'MedicalHistory',
        back_populates='patient',
        cascade='all, delete-orphan'
    )

    def to_dict(self):
        return {
            'medical_id': self.medical_id,
            'name': self.name,
            'aadhaar_number': self.aadhaar_number,
            'mobile_number': self.mobile_number,
            'date_of_birth': self.date_of_birth.isoformat() if self.date_of_birth else None,
            'gender': self.gender,
            'blood_group': self.blood_group,
            'address': self.address,
            'report_link_text': self.report_link_text,
        }
