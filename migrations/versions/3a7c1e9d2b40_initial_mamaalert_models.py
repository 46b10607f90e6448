"""initial mamaalert models

Revision ID: 3a7c1e9d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e9d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('email', sa.String(length=120), nullable=False),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('first_name', sa.String(length=80), nullable=False, server_default=''),
            sa.Column('last_name', sa.String(length=80), nullable=False, server_default=''),
            sa.Column('phone', sa.String(length=30), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
        )
        op.create_index('ix_users_email', 'users', ['email'], unique=True)

    if not insp.has_table('pregnancy_data'):
        op.create_table(
            'pregnancy_data',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('last_menstrual_period', sa.Date(), nullable=True),
            sa.Column('due_date', sa.Date(), nullable=True),
            sa.Column('weeks_pregnant', sa.Integer(), nullable=True),
            sa.Column('delivery_date', sa.Date(), nullable=True),
            sa.Column('is_high_risk', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('medical_conditions', sa.Text(), nullable=True),
            sa.Column('allergies', sa.Text(), nullable=True),
            sa.Column('current_medications', sa.Text(), nullable=True),
            sa.Column('previous_pregnancies', sa.Text(), nullable=True),
            sa.Column('doctor_name', sa.String(length=120), nullable=True),
            sa.Column('hospital_name', sa.String(length=200), nullable=True),
            sa.Column('emergency_notes', sa.Text(), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
        )
        op.create_index('ix_pregnancy_data_user_id', 'pregnancy_data', ['user_id'], unique=True)

    if not insp.has_table('emergency_contacts'):
        op.create_table(
            'emergency_contacts',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
            sa.Column('name', sa.String(length=120), nullable=False),
            sa.Column('phone', sa.String(length=30), nullable=False),
            sa.Column('relationship', sa.String(length=60), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=True),
            sa.Column('is_primary', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('emergency_alerts'):
        op.create_table(
            'emergency_alerts',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
            sa.Column('alert_type', sa.String(length=30), nullable=False, server_default='emergency'),
            sa.Column('message', sa.Text(), nullable=False),
            sa.Column('location', sa.String(length=255), nullable=True),
            sa.Column('resolved', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('timestamp', sa.DateTime(), server_default=sa.func.now(), nullable=False, index=True),
        )

    if not insp.has_table('emergency_planning'):
        op.create_table(
            'emergency_planning',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, unique=True),
            sa.Column('weekly_reminders', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
        )

    if not insp.has_table('emergency_checklist_items'):
        op.create_table(
            'emergency_checklist_items',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
            sa.Column('item_id', sa.String(length=20), nullable=False),
            sa.Column('is_checked', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
            sa.UniqueConstraint('user_id', 'item_id', name='uq_checklist_user_item'),
        )

    if not insp.has_table('symptom_logs'):
        op.create_table(
            'symptom_logs',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
            sa.Column('symptom_type', sa.String(length=120), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('severity', sa.String(length=20), nullable=False, server_default='mild'),
            sa.Column('is_emergency', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('timestamp', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('appointments'):
        op.create_table(
            'appointments',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
            sa.Column('appointment_date', sa.Date(), nullable=False),
            sa.Column('appointment_time', sa.Time(), nullable=False),
            sa.Column('hospital_name', sa.String(length=200), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('reminder_sent', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=True),
        )


def downgrade():
    for table in [
        'appointments', 'symptom_logs', 'emergency_checklist_items', 'emergency_planning',
        'emergency_alerts', 'emergency_contacts', 'pregnancy_data', 'users',
    ]:
        op.drop_table(table)
