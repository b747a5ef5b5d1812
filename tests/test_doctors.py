from medrecords.extensions import db
from medrecords.models import ConsultationHistory
from conftest import DOCTOR, login, create_patient, create_doctor, add_consultation


def test_add_and_list_doctors(admin_client):
    doctor = create_doctor(admin_client)
    assert isinstance(doctor['doctor_id'], int)
    assert doctor['status'] == 'Active'
    assert 'password' not in doctor and 'password_hash' not in doctor

    r = admin_client.get('/api/doctors')
    assert r.status_code == 200
    assert [d['email'] for d in r.get_json()['doctors']] == [DOCTOR['email']]


def test_add_doctor_rejects_bad_email_and_duplicates(admin_client):
    r = admin_client.post('/api/add_doctor', json=dict(DOCTOR, email='not-an-email'))
    assert r.status_code == 400

    create_doctor(admin_client)
    r = admin_client.post('/api/add_doctor', json=dict(DOCTOR, license_number='OTHER-1'))
    assert r.status_code == 400
    assert r.get_json()['error'] == 'Email already exists.'


def test_edit_doctor_keeps_omitted_fields(admin_client):
    doctor = create_doctor(admin_client)
    r = admin_client.post('/api/edit_doctor', json={
        'doctor_id': doctor['doctor_id'],
        'specialization': 'Neurology',
        'email': '',
    })
    assert r.status_code == 200
    updated = r.get_json()['doctor']
    assert updated['specialization'] == 'Neurology'
    assert updated['email'] == DOCTOR['email']
    assert updated['license_number'] == DOCTOR['license_number']
    assert updated['name'] == DOCTOR['name']


def test_edit_doctor_without_password_keeps_password(admin_client):
    doctor = create_doctor(admin_client)
    admin_client.post('/api/edit_doctor', json={'doctor_id': doctor['doctor_id'], 'name': 'Dr. V. Mehta'})
    admin_client.get('/logout')
    r = login(admin_client, '/doctor_signin', doctor_id=doctor['doctor_id'], password=DOCTOR['password'])
    assert r.status_code == 200


def test_reset_doctor_password(admin_client):
    doctor = create_doctor(admin_client)
    r = admin_client.post('/api/reset_doctor_password',
                          json={'doctor_id': doctor['doctor_id'], 'new_password': 'fresh456'})
    assert r.status_code == 200
    admin_client.get('/logout')
    assert login(admin_client, '/doctor_signin',
                 doctor_id=doctor['doctor_id'], password='fresh456').status_code == 200


def test_delete_doctor(admin_client):
    doctor = create_doctor(admin_client)
    r = admin_client.delete(f"/api/delete_doctor/{doctor['doctor_id']}")
    assert r.status_code == 200
    assert admin_client.get('/api/doctors').get_json()['doctors'] == []
    assert admin_client.delete(f"/api/delete_doctor/{doctor['doctor_id']}").status_code == 404


def test_delete_doctor_with_history_is_refused(admin_client):
    patient = create_patient(admin_client)
    doctor = create_doctor(admin_client)
    add_consultation(admin_client, patient['medical_id'], doctor['doctor_id'])

    r = admin_client.delete(f"/api/delete_doctor/{doctor['doctor_id']}")
    assert r.status_code == 400
    assert len(admin_client.get('/api/doctors').get_json()['doctors']) == 1


def _signed_in_doctor(client):
    patient = create_patient(client)
    doctor = create_doctor(client)
    client.get('/logout')
    login(client, '/doctor_signin', doctor_id=doctor['doctor_id'], password=DOCTOR['password'])
    return patient, doctor


def test_doctor_dashboard(admin_client):
    _, doctor = _signed_in_doctor(admin_client)
    r = admin_client.get('/doctor/dashboard')
    assert r.status_code == 200
    assert r.get_json()['doctor']['doctor_id'] == doctor['doctor_id']


def test_doctor_records_and_views_consultation(app, admin_client):
    patient, doctor = _signed_in_doctor(admin_client)

    r = admin_client.post('/doctor/add_patient_consultation_record', json={
        'patient_medical_id': patient['medical_id'],
        'description': 'Follow-up visit',
        'prescription': 'Metoprolol 25mg',
    })
    assert r.status_code == 201
    consultation = r.get_json()['consultation']
    assert consultation['doctor_id'] == doctor['doctor_id']

    r = admin_client.post('/doctor/view_patient_consultation_history',
                          json={'medical_id': patient['medical_id']})
    assert r.status_code == 200
    history = r.get_json()['consultationHistory']
    assert len(history) == 1
    assert history[0]['doctor_name'] == DOCTOR['name']
    assert history[0]['prescription'] == 'Metoprolol 25mg'

    with app.app_context():
        assert db.session.query(ConsultationHistory).count() == 1


def test_doctor_cannot_record_for_unknown_patient(admin_client):
    _signed_in_doctor(admin_client)
    r = admin_client.post('/doctor/add_patient_consultation_record', json={
        'patient_medical_id': '000000000000',
        'description': 'Ghost',
    })
    assert r.status_code == 404


def test_doctor_search_patient(admin_client):
    patient, _ = _signed_in_doctor(admin_client)

    r = admin_client.post('/doctor/search_patient', json={'medical_id': patient['medical_id']})
    assert r.status_code == 200
    body = r.get_json()
    assert body['patient']['name'] == patient['name']
    assert body['consultationHistory'] == []
    assert 'No consultation records' in body['success']

    r = admin_client.post('/doctor/search_patient', json={'medical_id': '000000000000'})
    assert r.status_code == 404


def test_empty_history_is_an_empty_list(admin_client):
    patient, _ = _signed_in_doctor(admin_client)
    r = admin_client.post('/doctor/view_patient_consultation_history',
                          json={'medical_id': patient['medical_id']})
    assert r.status_code == 200
    assert r.get_json() == {'consultationHistory': []}


def test_deactivated_doctor_loses_access(app, admin_client):
    _, doctor = _signed_in_doctor(admin_client)

    other = app.test_client()
    login(other, '/admin/login', username='admin', password='admin123')
    other.post('/api/edit_doctor', json={'doctor_id': doctor['doctor_id'], 'status': 'Inactive'})

    r = admin_client.get('/doctor/dashboard')
    assert r.status_code == 403
    assert r.get_json()['error'] == 'Account deactivated'
