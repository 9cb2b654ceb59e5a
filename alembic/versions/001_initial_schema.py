"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('system_key', sa.String(length=32), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('system_key'),
    )
    op.create_table(
        'positions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('system_key', sa.String(length=32), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('system_key'),
    )
    op.create_table(
        'specializations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('system_key', sa.String(length=32), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('system_key'),
    )
    op.create_table(
        'department_positions',
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.Column('position_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id']),
        sa.ForeignKeyConstraint(['position_id'], ['positions.id']),
        sa.PrimaryKeyConstraint('department_id', 'position_id'),
    )
    op.create_index('ix_department_positions_position_id', 'department_positions', ['position_id'])

    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('call_sign', sa.String(length=100), nullable=False),
        sa.Column('phone_number', sa.String(length=32), nullable=False, server_default=''),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('hire_date', sa.Date(), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False, server_default='Worker'),
        sa.Column('position_id', sa.Integer(), nullable=True),
        sa.Column('department_id', sa.Integer(), nullable=True),
        sa.Column('specialization_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['position_id'], ['positions.id']),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id']),
        sa.ForeignKeyConstraint(['specialization_id'], ['specializations.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_employees_position_id', 'employees', ['position_id'])
    op.create_index('ix_employees_department_id', 'employees', ['department_id'])
    op.create_index('ix_employees_specialization_id', 'employees', ['specialization_id'])

    op.create_table(
        'equipment_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_table(
        'equipment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('serial_number', sa.String(length=100), nullable=True),
        sa.Column('purchase_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('measurement', sa.String(length=16), nullable=False),
        sa.Column('amount', sa.Numeric(18, 2), nullable=False),
        sa.Column('image_data', sa.Text(), nullable=True),
        sa.Column('department_id', sa.Integer(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('responsible_employee_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id']),
        sa.ForeignKeyConstraint(['category_id'], ['equipment_categories.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['responsible_employee_id'], ['employees.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('serial_number'),
    )
    op.create_index('ix_equipment_department_id', 'equipment', ['department_id'])
    op.create_index('ix_equipment_category_id', 'equipment', ['category_id'])
    op.create_index('ix_equipment_responsible_employee_id', 'equipment', ['responsible_employee_id'])

    op.create_table(
        'utility_payments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.Column('responsible_employee_id', sa.Integer(), nullable=True),
        sa.Column('payment_type', sa.String(length=16), nullable=False),
        sa.Column('previous_value', sa.Numeric(18, 3), nullable=True),
        sa.Column('current_value', sa.Numeric(18, 3), nullable=True),
        sa.Column('previous_value_night', sa.Numeric(18, 3), nullable=True),
        sa.Column('current_value_night', sa.Numeric(18, 3), nullable=True),
        sa.Column('price_per_unit', sa.Numeric(18, 2), nullable=False),
        sa.Column('price_per_unit_night', sa.Numeric(18, 2), nullable=True),
        sa.Column('total_amount', sa.Numeric(18, 3), nullable=False),
        sa.Column('bill_image_url', sa.String(), nullable=True),
        sa.Column('payment_month', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['responsible_employee_id'], ['employees.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_utility_payments_department_id', 'utility_payments', ['department_id'])
    op.create_index('ix_utility_payments_responsible_employee_id', 'utility_payments', ['responsible_employee_id'])

    op.create_table(
        'fuel_expenses',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.Column('responsible_employee_id', sa.Integer(), nullable=True),
        sa.Column('equipment_id', sa.Integer(), nullable=True),
        sa.Column('fuel_type', sa.String(length=16), nullable=False),
        sa.Column('entry_date', sa.DateTime(), nullable=False),
        sa.Column('previous_mileage', sa.Numeric(18, 3), nullable=False),
        sa.Column('current_mileage', sa.Numeric(18, 3), nullable=False),
        sa.Column('price_per_liter', sa.Numeric(18, 2), nullable=False),
        sa.Column('total_amount', sa.Numeric(18, 3), nullable=False),
        sa.Column('odometer_image_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['responsible_employee_id'], ['employees.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['equipment_id'], ['equipment.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_fuel_expenses_department_id', 'fuel_expenses', ['department_id'])
    op.create_index('ix_fuel_expenses_responsible_employee_id', 'fuel_expenses', ['responsible_employee_id'])
    op.create_index('ix_fuel_expenses_equipment_id', 'fuel_expenses', ['equipment_id'])

    op.create_table(
        'fuel_incomes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.Column('receiver_employee_id', sa.Integer(), nullable=True),
        sa.Column('fuel_type', sa.String(length=16), nullable=False),
        sa.Column('amount', sa.Numeric(18, 3), nullable=False),
        sa.Column('transaction_date', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['receiver_employee_id'], ['employees.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_fuel_incomes_department_id', 'fuel_incomes', ['department_id'])
    op.create_index('ix_fuel_incomes_receiver_employee_id', 'fuel_incomes', ['receiver_employee_id'])


def downgrade() -> None:
    op.drop_table('fuel_incomes')
    op.drop_table('fuel_expenses')
    op.drop_table('utility_payments')
    op.drop_table('equipment')
    op.drop_table('equipment_categories')
    op.drop_table('employees')
    op.drop_table('department_positions')
    op.drop_table('specializations')
    op.drop_table('positions')
    op.drop_table('departments')
