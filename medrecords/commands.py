import click
from flask import current_app
from flask.cli import with_appcontext
from medrecords.extensions import db
from medrecords.models import Administrator


def seed_admin(username=None, password=None):
    """Creates the administrator account if it does not exist yet.

    Falls back to ADMIN_USERNAME / ADMIN_PASSWORD from the app config.
    Returns the (possibly pre-existing) account.
    """
    username = username or current_app.config['ADMIN_USERNAME']
    password = password or current_app.config.get('ADMIN_PASSWORD')

    admin = Administrator.query.filter_by(username=username).first()
    if admin is not None:
        return admin
    if not password:
        raise click.UsageError('ADMIN_PASSWORD is not configured')

    admin = Administrator(username=username)
    admin.set_password(password)
    db.session.add(admin)
    db.session.commit()
    current_app.logger.info(f"Administrator '{username}' created")
    return admin


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all tables and the configured administrator account."""
    db.create_all()
    admin = seed_admin()
    click.echo(f"Database initialized. Administrator: {admin.username}")


@click.command('create-admin')
@click.argument('username')
@click.password_option()
@with_appcontext
def create_admin_command(username, password):
    """Add an administrator account, or reset the password of an existing one."""
    admin = Administrator.query.filter_by(username=username).first()
    if admin is None:
        seed_admin(username, password)
        click.echo(f"Added administrator: {username}")
        return
    admin.set_password(password)
    db.session.commit()
    click.echo(f"Password reset for administrator: {username}")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_admin_command)
