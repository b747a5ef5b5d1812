from medrecords.extensions import db
from medrecords.models import Pharmacist, Pharmacy
from conftest import PHARMACIST, login, create_patient, create_doctor, create_pharmacist, create_pharmacy, \
    add_consultation


def test_add_pharmacist_generates_identifier(admin_client):
    pharmacist = create_pharmacist(admin_client)
    assert len(pharmacist['pharmacist_id']) == 12
    assert pharmacist['pharmacy_id'] is None

    r = admin_client.get('/api/pharmacists')
    assert [p['email_id'] for p in r.get_json()['pharmacists']] == [PHARMACIST['email_id']]


def test_duplicate_pharmacist_email_is_rejected(app, admin_client):
    create_pharmacist(admin_client)
    r = admin_client.post('/api/add_pharmacist', json=dict(
        PHARMACIST, mobile_number='9000011111', license_number='PH-LIC-99', aadhaar_number='111122223333'
    ))
    assert r.status_code == 400
    assert r.get_json()['error'] == 'Email ID already exists. Please use a different email.'
    with app.app_context():
        assert db.session.query(Pharmacist).count() == 1


def test_edit_pharmacist_merges_fields(admin_client):
    pharmacist = create_pharmacist(admin_client)
    r = admin_client.post('/api/edit_pharmacist', json={
        'pharmacist_id': pharmacist['pharmacist_id'],
        'pharmacist_name': 'Neha K.',
        'email_id': '',
    })
    assert r.status_code == 200
    updated = r.get_json()['pharmacist']
    assert updated['pharmacist_name'] == 'Neha K.'
    assert updated['email_id'] == PHARMACIST['email_id']
    assert updated['mobile_number'] == PHARMACIST['mobile_number']


def test_pharmacist_owning_pharmacy_cannot_be_deleted(admin_client):
    pharmacist = create_pharmacist(admin_client)
    pharmacy = create_pharmacy(admin_client, pharmacist['pharmacist_id'])

    r = admin_client.delete(f"/api/delete_pharmacist/{pharmacist['pharmacist_id']}")
    assert r.status_code == 400

    assert admin_client.delete(f"/api/delete_pharmacy/{pharmacy['pharmacy_id']}").status_code == 200
    assert admin_client.delete(f"/api/delete_pharmacist/{pharmacist['pharmacist_id']}").status_code == 200


def test_reset_pharmacist_password(admin_client):
    pharmacist = create_pharmacist(admin_client)
    r = admin_client.post('/api/reset_pharmacist_password', json={
        'pharmacist_id': pharmacist['pharmacist_id'], 'new_password': 'newpass1'
    })
    assert r.status_code == 200
    admin_client.get('/logout')
    assert login(admin_client, '/pharmacist_signin',
                 pharmacist_id=pharmacist['pharmacist_id'], password='newpass1').status_code == 200


def test_pharmacist_dashboard_data_shape(admin_client):
    pharmacist = create_pharmacist(admin_client)
    admin_client.get('/logout')
    login(admin_client, '/pharmacist_signin', pharmacist_id=pharmacist['pharmacist_id'], password='pills123')

    r = admin_client.post('/pharmacist_dashboard_data')
    assert r.status_code == 200
    assert r.get_json()['pharmacist'] == {
        'pharmacist_id': pharmacist['pharmacist_id'],
        'name': PHARMACIST['pharmacist_name'],
        'email': PHARMACIST['email_id'],
        'phone': PHARMACIST['mobile_number'],
        'license_number': PHARMACIST['license_number'],
        'aadhaar_number': PHARMACIST['aadhaar_number'],
    }


def test_pharmacy_requires_existing_pharmacist(admin_client):
    r = admin_client.post('/api/add_pharmacy', json={
        'pharmacy_name': 'Nowhere Meds', 'location': 'Nowhere',
        'pharmacist_id': '000000000000', 'password': 'x1234567',
    })
    assert r.status_code == 404


def test_pharmacist_manages_at_most_one_pharmacy(app, admin_client):
    pharmacist = create_pharmacist(admin_client)
    create_pharmacy(admin_client, pharmacist['pharmacist_id'])
    r = admin_client.post('/api/add_pharmacy', json={
        'pharmacy_name': 'Second Shop', 'location': 'Camp',
        'pharmacist_id': pharmacist['pharmacist_id'], 'password': 'x1234567',
    })
    assert r.status_code == 400
    with app.app_context():
        assert db.session.query(Pharmacy).count() == 1


def test_edit_pharmacy_merges_fields(admin_client):
    pharmacist = create_pharmacist(admin_client)
    pharmacy = create_pharmacy(admin_client, pharmacist['pharmacist_id'])
    r = admin_client.post('/api/edit_pharmacy', json={
        'pharmacy_id': pharmacy['pharmacy_id'],
        'location': 'Kothrud',
        'pharmacist_id': pharmacist['pharmacist_id'],
        'pharmacy_name': '',
    })
    assert r.status_code == 200
    updated = r.get_json()['pharmacy']
    assert updated['location'] == 'Kothrud'
    assert updated['pharmacy_name'] == 'Good Health Chemists'


def test_reset_pharmacy_password(admin_client):
    pharmacist = create_pharmacist(admin_client)
    pharmacy = create_pharmacy(admin_client, pharmacist['pharmacist_id'])
    r = admin_client.post(f"/api/reset_pharmacy_password/{pharmacy['pharmacy_id']}", json={'password': 'counter9'})
    assert r.status_code == 200
    admin_client.get('/logout')
    assert login(admin_client, '/pharmacy_signin',
                 shop_id=pharmacy['pharmacy_id'], password='shop1234').status_code == 401
    assert login(admin_client, '/pharmacy_signin',
                 shop_id=pharmacy['pharmacy_id'], password='counter9').status_code == 200


def test_pharmacy_reads_patient_prescriptions(admin_client):
    patient = create_patient(admin_client)
    doctor = create_doctor(admin_client)
    add_consultation(admin_client, patient['medical_id'], doctor['doctor_id'], prescription='Amoxicillin 500mg')
    pharmacist = create_pharmacist(admin_client)
    pharmacy = create_pharmacy(admin_client, pharmacist['pharmacist_id'])
    admin_client.get('/logout')

    login(admin_client, '/pharmacy_signin', shop_id=pharmacy['pharmacy_id'], password='shop1234')
    assert admin_client.get('/pharmacy_dashboard').get_json()['pharmacy']['pharmacy_id'] == pharmacy['pharmacy_id']

    r = admin_client.post('/pharmacy_dashboard_data', json={'patient_medical_id': patient['medical_id']})
    assert r.status_code == 200
    history = r.get_json()['patientHistory']
    assert [h['prescription'] for h in history] == ['Amoxicillin 500mg']
