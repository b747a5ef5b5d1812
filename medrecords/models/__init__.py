from medrecords.models.user_models import Administrator, Doctor, GENDERS, DOCTOR_STATUSES
from medrecords.models.pharmacy_models import Pharmacist, Pharmacy
from medrecords.models.patient_models import Patient, BLOOD_GROUPS
from medrecords.models.history_models import ConsultationHistory, MedicalHistory
from medrecords.models.system_models import AuditLog
