import pytest
from medrecords.extensions import db
from medrecords.models import Patient
from medrecords.utils import id_generator
from medrecords.utils.errors import IdentifierExhaustedError
from conftest import create_patient


def test_generated_identifiers_are_twelve_digits():
    for _ in range(200):
        value = id_generator.generate_identifier()
        assert len(value) == 12
        assert value.isdigit()
        assert value[0] != '0'


def test_allocation_skips_taken_values(app, admin_client, monkeypatch):
    taken = create_patient(admin_client)['medical_id']
    candidates = iter([taken, taken, '555555555555'])
    monkeypatch.setattr(id_generator, 'generate_identifier', lambda: next(candidates))

    with app.app_context():
        assert id_generator.allocate_identifier(Patient, 'medical_id') == '555555555555'


def test_allocation_gives_up_after_max_attempts(app, admin_client, monkeypatch):
    taken = create_patient(admin_client)['medical_id']
    calls = []

    def always_taken():
        calls.append(1)
        return taken

    monkeypatch.setattr(id_generator, 'generate_identifier', always_taken)
    with app.app_context():
        with pytest.raises(IdentifierExhaustedError):
            id_generator.allocate_identifier(Patient, 'medical_id', max_attempts=3)
    assert len(calls) == 3


def test_exhausted_allocation_returns_generic_500(app, admin_client, monkeypatch):
    taken = create_patient(admin_client)['medical_id']
    monkeypatch.setattr(id_generator, 'generate_identifier', lambda: taken)

    r = admin_client.post('/api/admin/add_patient', json={
        'name': 'Second Patient',
        'aadhaar_number': '999988887777',
        'mobile_number': '9000000001',
        'date_of_birth': '1985-07-07',
        'gender': 'Male',
        'blood_group': 'A+',
        'address': 'Somewhere',
    })
    assert r.status_code == 500
    assert r.get_json() == {'error': 'Unable to allocate a unique identifier'}
    with app.app_context():
        assert db.session.query(Patient).count() == 1
