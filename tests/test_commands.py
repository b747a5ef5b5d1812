from medrecords.extensions import db
from medrecords.models import Administrator
from conftest import login


def test_init_db_is_idempotent(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['init-db'])
    assert result.exit_code == 0
    assert 'Administrator: admin' in result.output
    with app.app_context():
        assert db.session.query(Administrator).count() == 1


def test_create_admin_adds_and_resets(app, client):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['create-admin', 'ops', '--password', 'opspass1'])
    assert result.exit_code == 0
    assert login(client, '/admin/login', username='ops', password='opspass1').status_code == 200

    result = runner.invoke(args=['create-admin', 'ops', '--password', 'opspass2'])
    assert result.exit_code == 0
    assert 'Password reset' in result.output
    assert login(client, '/admin/login', username='ops', password='opspass1').status_code == 401
