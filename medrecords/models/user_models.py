from datetime import datetime
from medrecords.extensions import db, bcrypt

GENDERS = ('Male', 'Female', 'Other')
DOCTOR_STATUSES = ('Active', 'Inactive')


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class CredentialMixin:
    """Salted one-way password storage shared by every sign-in account."""
    password_hash = db.Column(db.String(255), nullable=False)

    def set_password(self, password: str) -> None:
        """Hashes and sets the account password."""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password: str) -> bool:
        """Constant-time comparison of a submitted password against the stored hash."""
        if not password or not self.password_hash:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)


class Administrator(CredentialMixin, TimestampMixin, db.Model):
    """Back-office account; seeded from configuration by the CLI."""
    __tablename__ = 'administrators'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False, index=True)

    def to_dict(self):
        return {'id': self.id, 'username': self.username}


class Doctor(CredentialMixin, TimestampMixin, db.Model):
    """Doctor account, managed by administrators only."""
    __tablename__ = 'doctors'

    doctor_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), nullable=False)
    specialization = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    phone_number = db.Column(db.String(15), nullable=False)
    address = db.Column(db.String(255))
    gender = db.Column(db.Enum(*GENDERS, name='doctor_gender'), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)
    license_number = db.Column(db.String(50), unique=True, nullable=False)
    status = db.Column(db.Enum(*DOCTOR_STATUSES, name='doctor_status'), nullable=False, default='Active')

    # --- Relationships ---
    consultations = db.relationship('ConsultationHistory', back_populates='doctor', lazy='dynamic')
    medical_histories = db.relationship('MedicalHistory', back_populates='doctor', lazy='dynamic')

    @property
    def is_active(self):
        return self.status == 'Active'

    def to_dict(self):
        return {
            'doctor_id': self.doctor_id,
            'name': self.name,
            'specialization': self.specialization,
            'email': self.email,
            'phone_number': self.phone_number,
            'address': self.address,
            'gender': self.gender,
            'date_of_birth': self.date_of_birth.isoformat() if self.date_of_birth else None,
            'license_number': self.license_number,
            'status': self.status,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
