from flask import jsonify
from medrecords.models import Administrator, Patient, Doctor, Pharmacy, Pharmacist, ConsultationHistory
from .common import load_principal_record


def get_dashboard():
    """Record counts for the admin landing page."""
    admin = load_principal_record(Administrator, 'admin', cast=int)
    return jsonify({
        'admin': admin.username,
        'counts': {
            'patients': Patient.query.count(),
            'doctors': Doctor.query.count(),
            'pharmacies': Pharmacy.query.count(),
            'pharmacists': Pharmacist.query.count(),
            'consultations': ConsultationHistory.query.count(),
        }
    }), 200
