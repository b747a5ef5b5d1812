"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

GENDERS = ('Male', 'Female', 'Other')
BLOOD_GROUPS = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade():
    op.create_table(
        'administrators',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_administrators_username', 'administrators', ['username'], unique=True)

    op.create_table(
        'doctors',
        sa.Column('doctor_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('specialization', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('phone_number', sa.String(length=15), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('gender', sa.Enum(*GENDERS, name='doctor_gender'), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('license_number', sa.String(length=50), nullable=False),
        sa.Column('status', sa.Enum('Active', 'Inactive', name='doctor_status'), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('doctor_id'),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('license_number')
    )

    op.create_table(
        'pharmacists',
        sa.Column('pharmacist_id', sa.String(length=50), nullable=False),
        sa.Column('pharmacist_name', sa.String(length=50), nullable=False),
        sa.Column('mobile_number', sa.String(length=15), nullable=False),
        sa.Column('license_number', sa.String(length=50), nullable=False),
        sa.Column('aadhaar_number', sa.String(length=12), nullable=False),
        sa.Column('email_id', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('pharmacist_id'),
        sa.UniqueConstraint('mobile_number'),
        sa.UniqueConstraint('license_number'),
        sa.UniqueConstraint('aadhaar_number'),
        sa.UniqueConstraint('email_id')
    )

    op.create_table(
        'pharmacies',
        sa.Column('pharmacy_id', sa.String(length=12), nullable=False),
        sa.Column('pharmacy_name', sa.String(length=100), nullable=False),
        sa.Column('location', sa.String(length=100), nullable=False),
        sa.Column('pharmacist_id', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['pharmacist_id'], ['pharmacists.pharmacist_id']),
        sa.PrimaryKeyConstraint('pharmacy_id'),
        sa.UniqueConstraint('pharmacist_id')
    )

    op.create_table(
        'patients',
        sa.Column('medical_id', sa.String(length=12), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('aadhaar_number', sa.String(length=12), nullable=False),
        sa.Column('mobile_number', sa.String(length=10), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('gender', sa.Enum(*GENDERS, name='patient_gender'), nullable=False),
        sa.Column('blood_group', sa.Enum(*BLOOD_GROUPS, name='patient_blood_group'), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('report_link_text', sa.Text(), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('medical_id'),
        sa.UniqueConstraint('aadhaar_number')
    )

    op.create_table(
        'patient_consultation_history',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('medical_id', sa.String(length=12), nullable=False),
        sa.Column('doctor_id', sa.Integer(), nullable=False),
        sa.Column('consultation_date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('prescription', sa.Text(), nullable=True),
        sa.Column('report_link', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['doctor_id'], ['doctors.doctor_id']),
        sa.ForeignKeyConstraint(['medical_id'], ['patients.medical_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_patient_consultation_history_medical_id',
                    'patient_consultation_history', ['medical_id'])
    op.create_index('ix_patient_consultation_history_doctor_id',
                    'patient_consultation_history', ['doctor_id'])

    op.create_table(
        'patient_medical_history',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('medical_id', sa.String(length=12), nullable=False),
        sa.Column('doctor_id', sa.Integer(), nullable=False),
        sa.Column('known_allergies', sa.Text(), nullable=True),
        sa.Column('chronic_diseases', sa.Text(), nullable=True),
        sa.Column('past_surgeries', sa.Text(), nullable=True),
        sa.Column('previous_hospitalizations', sa.Text(), nullable=True),
        sa.Column('family_medical_history', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['doctor_id'], ['doctors.doctor_id']),
        sa.ForeignKeyConstraint(['medical_id'], ['patients.medical_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_patient_medical_history_medical_id',
                    'patient_medical_history', ['medical_id'])

    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.Column('actor_role', sa.String(length=20), nullable=True),
        sa.Column('actor_id', sa.String(length=50), nullable=True),
        sa.Column('action', sa.String(length=100), nullable=False),
        sa.Column('resource', sa.String(length=100), nullable=True),
        sa.Column('resource_id', sa.String(length=100), nullable=True),
        sa.Column('ip_address', sa.String(length=45), nullable=True),
        sa.Column('user_agent', sa.String(length=255), nullable=True),
        sa.Column('success', sa.Boolean(), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('audit_logs')
    op.drop_index('ix_patient_medical_history_medical_id', table_name='patient_medical_history')
    op.drop_table('patient_medical_history')
    op.drop_index('ix_patient_consultation_history_doctor_id', table_name='patient_consultation_history')
    op.drop_index('ix_patient_consultation_history_medical_id', table_name='patient_consultation_history')
    op.drop_table('patient_consultation_history')
    op.drop_table('patients')
    op.drop_table('pharmacies')
    op.drop_table('pharmacists')
    op.drop_table('doctors')
    op.drop_index('ix_administrators_username', table_name='administrators')
    op.drop_table('administrators')
    sa.Enum(name='patient_blood_group').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='patient_gender').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='doctor_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='doctor_gender').drop(op.get_bind(), checkfirst=True)
