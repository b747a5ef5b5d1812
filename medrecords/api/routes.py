# /medrecords/api/routes.py

from . import api_bp
from medrecords.utils.decorators import audit_log, role_required
from .controllers import (
    admin_controller, patient_controller, doctor_controller,
    pharmacy_controller, pharmacist_controller, consultation_controller
)


# --- Admin Dashboard ---
@api_bp.route('/admin/dashboard', methods=['GET'])
@role_required('admin')
def admin_dashboard():
    return admin_controller.get_dashboard()


# --- Patient Management Endpoints ---
@api_bp.route('/admin/patients', methods=['GET'])
@audit_log("VIEW_ALL_PATIENTS", "patients")
@role_required('admin')
def get_patients_route():
    return patient_controller.get_all_patients()

@api_bp.route('/admin/add_patient', methods=['POST'])
@audit_log("CREATE_PATIENT", "patients")
@role_required('admin')
def add_patient_route():
    return patient_controller.add_patient()

@api_bp.route('/admin/edit_patient', methods=['POST'])
@audit_log("UPDATE_PATIENT", "patients")
@role_required('admin')
def edit_patient_route():
    return patient_controller.edit_patient()

@api_bp.route('/admin/delete_patient', methods=['DELETE'])
@audit_log("DELETE_PATIENT", "patients")
@role_required('admin')
def delete_patient_route():
    return patient_controller.delete_patient()

@api_bp.route('/admin/reset_patient_password', methods=['POST'])
@audit_log("RESET_PATIENT_PASSWORD", "patients")
@role_required('admin')
def reset_patient_password_route():
    return patient_controller.reset_patient_password()


# --- Doctor Management Endpoints ---
@api_bp.route('/doctors', methods=['GET'])
@audit_log("VIEW_ALL_DOCTORS", "doctors")
@role_required('admin')
def get_doctors_route():
    return doctor_controller.get_all_doctors()

@api_bp.route('/add_doctor', methods=['POST'])
@audit_log("CREATE_DOCTOR", "doctors")
@role_required('admin')
def add_doctor_route():
    return doctor_controller.add_doctor()

@api_bp.route('/edit_doctor', methods=['POST'])
@audit_log("UPDATE_DOCTOR", "doctors")
@role_required('admin')
def edit_doctor_route():
    return doctor_controller.edit_doctor()

@api_bp.route('/delete_doctor/<int:doctor_id>', methods=['DELETE'])
@audit_log("DELETE_DOCTOR", "doctors")
@role_required('admin')
def delete_doctor_route(doctor_id):
    return doctor_controller.delete_doctor(doctor_id)

@api_bp.route('/reset_doctor_password', methods=['POST'])
@audit_log("RESET_DOCTOR_PASSWORD", "doctors")
@role_required('admin')
def reset_doctor_password_route():
    return doctor_controller.reset_doctor_password()


# --- Pharmacy Management Endpoints ---
@api_bp.route('/pharmacies', methods=['GET'])
@audit_log("VIEW_ALL_PHARMACIES", "pharmacies")
@role_required('admin')
def get_pharmacies_route():
    return pharmacy_controller.get_all_pharmacies()

@api_bp.route('/add_pharmacy', methods=['POST'])
@audit_log("CREATE_PHARMACY", "pharmacies")
@role_required('admin')
def add_pharmacy_route():
    return pharmacy_controller.add_pharmacy()

@api_bp.route('/edit_pharmacy', methods=['POST'])
@audit_log("UPDATE_PHARMACY", "pharmacies")
@role_required('admin')
def edit_pharmacy_route():
    return pharmacy_controller.edit_pharmacy()

@api_bp.route('/delete_pharmacy/<string:pharmacy_id>', methods=['DELETE'])
@audit_log("DELETE_PHARMACY", "pharmacies")
@role_required('admin')
def delete_pharmacy_route(pharmacy_id):
    return pharmacy_controller.delete_pharmacy(pharmacy_id)

@api_bp.route('/reset_pharmacy_password/<string:pharmacy_id>', methods=['POST'])
@audit_log("RESET_PHARMACY_PASSWORD", "pharmacies")
@role_required('admin')
def reset_pharmacy_password_route(pharmacy_id):
    return pharmacy_controller.reset_pharmacy_password(pharmacy_id)


# --- Pharmacist Management Endpoints ---
@api_bp.route('/pharmacists', methods=['GET'])
@audit_log("VIEW_ALL_PHARMACISTS", "pharmacists")
@role_required('admin')
def get_pharmacists_route():
    return pharmacist_controller.get_all_pharmacists()

@api_bp.route('/add_pharmacist', methods=['POST'])
@audit_log("CREATE_PHARMACIST", "pharmacists")
@role_required('admin')
def add_pharmacist_route():
    return pharmacist_controller.add_pharmacist()

@api_bp.route('/edit_pharmacist', methods=['POST'])
@audit_log("UPDATE_PHARMACIST", "pharmacists")
@role_required('admin')
def edit_pharmacist_route():
    return pharmacist_controller.edit_pharmacist()

@api_bp.route('/delete_pharmacist/<string:pharmacist_id>', methods=['DELETE'])
@audit_log("DELETE_PHARMACIST", "pharmacists")
@role_required('admin')
def delete_pharmacist_route(pharmacist_id):
    return pharmacist_controller.delete_pharmacist(pharmacist_id)

@api_bp.route('/reset_pharmacist_password', methods=['POST'])
@audit_log("RESET_PHARMACIST_PASSWORD", "pharmacists")
@role_required('admin')
def reset_pharmacist_password_route():
    return pharmacist_controller.reset_pharmacist_password()


# --- Consultation History Endpoints ---
@api_bp.route('/admin/consultations', methods=['GET'])
@audit_log("VIEW_ALL_CONSULTATIONS", "consultations")
@role_required('admin')
def get_consultations_route():
    return consultation_controller.get_all_consultations()

@api_bp.route('/admin/add_consultation', methods=['POST'])
@audit_log("CREATE_CONSULTATION", "consultations")
@role_required('admin')
def add_consultation_route():
    return consultation_controller.add_consultation()

@api_bp.route('/admin/edit_consultation', methods=['POST'])
@audit_log("UPDATE_CONSULTATION", "consultations")
@role_required('admin')
def edit_consultation_route():
    return consultation_controller.edit_consultation()

@api_bp.route('/admin/delete_consultation/<int:consultation_id>', methods=['DELETE'])
@audit_log("DELETE_CONSULTATION", "consultations")
@role_required('admin')
def delete_consultation_route(consultation_id):
    return consultation_controller.delete_consultation(consultation_id)
