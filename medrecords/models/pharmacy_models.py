from medrecords.extensions import db
from medrecords.models.user_models import CredentialMixin, TimestampMixin


class Pharmacist(CredentialMixin, TimestampMixin, db.Model):
    __tablename__ = 'pharmacists'

    pharmacist_id = db.Column(db.String(50), primary_key=True)
    pharmacist_name = db.Column(db.String(50), nullable=False)
    mobile_number = db.Column(db.String(15), unique=True, nullable=False)
    license_number = db.Column(db.String(50), unique=True, nullable=False)
    aadhaar_number = db.Column(db.String(12), unique=True, nullable=False)
    email_id = db.Column(db.String(100), unique=True, nullable=False)

    # A pharmacist owns at most one pharmacy
    pharmacy = db.relationship('Pharmacy', back_populates='pharmacist', uselist=False)

    def to_dict(self):
        return {
            'pharmacist_id': self.pharmacist_id,
            'pharmacist_name': self.pharmacist_name,
            'mobile_number': self.mobile_number,
            'license_number': self.license_number,
            'aadhaar_number': self.aadhaar_number,
            'email_id': self.email_id,
            'pharmacy_id': self.pharmacy.pharmacy_id if self.pharmacy else None,
        }


class Pharmacy(CredentialMixin, TimestampMixin, db.Model):
    __tablename__ = 'pharmacies'

    pharmacy_id = db.Column(db.String(12), primary_key=True)
    pharmacy_name = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(100), nullable=False)
    pharmacist_id = db.Column(
        db.String(50), db.ForeignKey('pharmacists.pharmacist_id'), unique=True, nullable=False
    )

    pharmacist = db.relationship('Pharmacist', back_populates='pharmacy')

    def to_dict(self):
        return {
            'pharmacy_id': self.pharmacy_id,
            'pharmacy_name': self.pharmacy_name,
            'location': self.location,
            'pharmacist_id': self.pharmacist_id,
        }
