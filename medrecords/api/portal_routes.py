# /medrecords/api/portal_routes.py

from flask import current_app
from . import portal_bp
from medrecords.extensions import limiter
from medrecords.utils.decorators import audit_log, role_required
from .controllers import (
    auth_controller, patient_controller, doctor_controller,
    pharmacy_controller, pharmacist_controller
)


def signin_limit():
    return current_app.config['SIGNIN_RATE_LIMIT']


def signup_limit():
    return current_app.config['SIGNUP_RATE_LIMIT']


# --- Session Endpoints ---
@portal_bp.route('/admin/login', methods=['POST'])
@limiter.limit(signin_limit)
@audit_log("ADMIN_LOGIN", "authentication")
def admin_login():
    return auth_controller.admin_login()

@portal_bp.route('/admin/logout', methods=['GET', 'POST'])
@portal_bp.route('/logout', methods=['GET', 'POST'])
@audit_log("LOGOUT", "authentication")
def logout():
    return auth_controller.logout()

@portal_bp.route('/session', methods=['GET'])
def current_session():
    return auth_controller.current_session()


# --- Patient Endpoints ---
@portal_bp.route('/patient_signup', methods=['POST'])
@limiter.limit(signup_limit)
@audit_log("PATIENT_SIGNUP", "patients")
def patient_signup():
    return auth_controller.patient_signup()

@portal_bp.route('/patient_signin', methods=['POST'])
@limiter.limit(signin_limit)
@audit_log("PATIENT_LOGIN", "authentication")
def patient_signin():
    return auth_controller.patient_signin()

@portal_bp.route('/get_patient_data', methods=['GET'])
@audit_log("VIEW_OWN_RECORDS", "patients")
@role_required('patient')
def get_patient_data():
    return patient_controller.get_patient_data()


# --- Doctor Endpoints ---
@portal_bp.route('/doctor_signin', methods=['POST'])
@limiter.limit(signin_limit)
@audit_log("DOCTOR_LOGIN", "authentication")
def doctor_signin():
    return auth_controller.doctor_signin()

@portal_bp.route('/doctor/dashboard', methods=['GET'])
@role_required('doctor')
def doctor_dashboard():
    return doctor_controller.get_doctor_dashboard()

@portal_bp.route('/doctor/search_patient', methods=['POST'])
@audit_log("SEARCH_PATIENT", "patients")
@role_required('doctor')
def search_patient():
    return doctor_controller.search_patient()

@portal_bp.route('/doctor/add_patient_consultation_record', methods=['POST'])
@audit_log("CREATE_CONSULTATION", "consultations")
@role_required('doctor')
def add_patient_consultation_record():
    return doctor_controller.add_consultation_record()

@portal_bp.route('/doctor/view_patient_consultation_history', methods=['POST'])
@audit_log("VIEW_CONSULTATION_HISTORY", "consultations")
@role_required('doctor')
def view_patient_consultation_history():
    return doctor_controller.view_patient_consultation_history()


# --- Pharmacy Endpoints ---
@portal_bp.route('/pharmacy_signin', methods=['POST'])
@limiter.limit(signin_limit)
@audit_log("PHARMACY_LOGIN", "authentication")
def pharmacy_signin():
    return auth_controller.pharmacy_signin()

@portal_bp.route('/pharmacy_dashboard', methods=['GET'])
@role_required('pharmacy')
def pharmacy_dashboard():
    return pharmacy_controller.get_pharmacy_dashboard()

@portal_bp.route('/pharmacy_dashboard_data', methods=['POST'])
@audit_log("VIEW_PRESCRIPTIONS", "consultations")
@role_required('pharmacy')
def pharmacy_dashboard_data():
    return pharmacy_controller.get_pharmacy_dashboard_data()


# --- Pharmacist Endpoints ---
@portal_bp.route('/pharmacist_signin', methods=['POST'])
@limiter.limit(signin_limit)
@audit_log("PHARMACIST_LOGIN", "authentication")
def pharmacist_signin():
    return auth_controller.pharmacist_signin()

@portal_bp.route('/pharmacist_dashboard', methods=['GET'])
@role_required('pharmacist')
def pharmacist_dashboard():
    return pharmacist_controller.get_pharmacist_dashboard()

@portal_bp.route('/pharmacist_dashboard_data', methods=['POST'])
@role_required('pharmacist')
def pharmacist_dashboard_data():
    return pharmacist_controller.get_pharmacist_dashboard_data()
