import pytest
from medrecords import create_app
from medrecords.commands import seed_admin
from medrecords.extensions import db

PATIENT = {
    'name': 'Asha Rao',
    'aadhaar_number': '123412341234',
    'mobile_number': '9876543210',
    'date_of_birth': '1990-04-12',
    'gender': 'Female',
    'blood_group': 'O+',
    'address': '12 MG Road, Pune',
}

DOCTOR = {
    'name': 'Dr. Vikram Mehta',
    'specialization': 'Cardiology',
    'password': 'heart123',
    'email': 'vikram@example.com',
    'phone_number': '9123456780',
    'address': 'City Hospital',
    'gender': 'Male',
    'date_of_birth': '1975-01-30',
    'license_number': 'MH-DOC-001',
}

PHARMACIST = {
    'pharmacist_name': 'Neha Kulkarni',
    'mobile_number': '9988776655',
    'license_number': 'PH-LIC-77',
    'aadhaar_number': '567856785678',
    'email_id': 'neha@example.com',
    'password': 'pills123',
}


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        seed_admin()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, path, **credentials):
    return client.post(path, json=credentials)


@pytest.fixture
def admin_client(client):
    r = login(client, '/admin/login', username='admin', password='admin123')
    assert r.status_code == 200
    return client


def create_patient(client, **overrides):
    payload = dict(PATIENT, **overrides)
    r = client.post('/api/admin/add_patient', json=payload)
    assert r.status_code == 201, r.get_json()
    return r.get_json()['patient']


def create_doctor(client, **overrides):
    payload = dict(DOCTOR, **overrides)
    r = client.post('/api/add_doctor', json=payload)
    assert r.status_code == 201, r.get_json()
    return r.get_json()['doctor']


def create_pharmacist(client, **overrides):
    payload = dict(PHARMACIST, **overrides)
    r = client.post('/api/add_pharmacist', json=payload)
    assert r.status_code == 201, r.get_json()
    return r.get_json()['pharmacist']


def create_pharmacy(client, pharmacist_id, **overrides):
    payload = dict({
        'pharmacy_name': 'Good Health Chemists',
        'location': 'Shivaji Nagar',
        'pharmacist_id': pharmacist_id,
        'password': 'shop1234',
    }, **overrides)
    r = client.post('/api/add_pharmacy', json=payload)
    assert r.status_code == 201, r.get_json()
    return r.get_json()['pharmacy']


def add_consultation(client, medical_id, doctor_id, **overrides):
    payload = dict({
        'medical_id': medical_id,
        'doctor_id': doctor_id,
        'consultation_date': '2024-03-01',
        'description': 'Chest pain on exertion',
        'prescription': 'Aspirin 75mg',
    }, **overrides)
    r = client.post('/api/admin/add_consultation', json=payload)
    assert r.status_code == 201, r.get_json()
    return r.get_json()['consultation']
