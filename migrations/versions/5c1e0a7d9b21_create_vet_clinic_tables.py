"""Create Users, Pets, Appointments, MedicalRecords and Treatments tables

Revision ID: 5c1e0a7d9b21
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c1e0a7d9b21'
down_revision = None
branch_labels = None
depends_on = None


def _audit_columns():
    return [
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('active_status', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('created_by', sa.String(length=36), nullable=True),
        sa.Column('modified_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('modified_by', sa.String(length=36), nullable=True),
    ]


def upgrade():
    op.create_table(
        'Users',
        *_audit_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
    )
    op.create_index('ix_Users_email', 'Users', ['email'], unique=True)
    op.create_index('ix_Users_role', 'Users', ['role'])
    op.create_index('ix_Users_active_status', 'Users', ['active_status'])

    op.create_table(
        'Pets',
        *_audit_columns(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('species', sa.String(length=50), nullable=False),
        sa.Column('breed', sa.String(length=100), nullable=True),
        sa.Column('gender', sa.String(length=20), nullable=False),
        sa.Column('birth_date', sa.String(length=30), nullable=True),
        sa.Column('owner_name', sa.String(length=100), nullable=True),
        sa.Column('owner_phone', sa.String(length=20), nullable=True),
    )
    op.create_index('ix_Pets_owner_name', 'Pets', ['owner_name'])
    op.create_index('ix_Pets_owner_phone', 'Pets', ['owner_phone'])
    op.create_index('ix_Pets_active_status', 'Pets', ['active_status'])

    op.create_table(
        'Appointments',
        *_audit_columns(),
        sa.Column('pet_id', sa.String(length=36), sa.ForeignKey('Pets.id'), nullable=False),
        sa.Column('doctor_id', sa.String(length=36), sa.ForeignKey('Users.id'), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='Pending'),
        sa.Column('appointment_datetime', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    op.create_index('ix_Appointments_pet_id', 'Appointments', ['pet_id'])
    op.create_index('ix_Appointments_doctor_id', 'Appointments', ['doctor_id'])
    op.create_index('ix_Appointments_appointment_datetime', 'Appointments', ['appointment_datetime'])
    op.create_index('ix_Appointments_active_status', 'Appointments', ['active_status'])

    op.create_table(
        'MedicalRecords',
        *_audit_columns(),
        sa.Column('appointment_id', sa.String(length=36), sa.ForeignKey('Appointments.id'), nullable=False),
        sa.Column('pet_id', sa.String(length=36), sa.ForeignKey('Pets.id'), nullable=False),
        sa.Column('diagnosis', sa.Text(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    op.create_index('ix_MedicalRecords_appointment_id', 'MedicalRecords', ['appointment_id'])
    op.create_index('ix_MedicalRecords_pet_id', 'MedicalRecords', ['pet_id'])
    op.create_index('ix_MedicalRecords_active_status', 'MedicalRecords', ['active_status'])

    op.create_table(
        'Treatments',
        *_audit_columns(),
        sa.Column('medicalrecord_id', sa.String(length=36), sa.ForeignKey('MedicalRecords.id'), nullable=False),
        sa.Column('doctor_id', sa.String(length=36), sa.ForeignKey('Users.id'), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('cost', sa.Integer(), nullable=False),
    )
    op.create_index('ix_Treatments_medicalrecord_id', 'Treatments', ['medicalrecord_id'])
    op.create_index('ix_Treatments_active_status', 'Treatments', ['active_status'])


def downgrade():
    op.drop_table('Treatments')
    op.drop_table('MedicalRecords')
    op.drop_table('Appointments')
    op.drop_table('Pets')
    op.drop_table('Users')
