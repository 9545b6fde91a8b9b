"""initial RBAC schema with orders and customers

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261019_01'
down_revision = None
branch_labels = None
depends_on = None

ROLES = ["Admin", "Manager", "Staff", "Customer"]
ACTIONS = ["View", "Add", "Edit", "Delete"]
MODULES = ["Order", "Customer"]

# Matriz inicial papel -> ações (mesma para todos os módulos)
ROLE_ACTIONS = {
    "Admin": ["View", "Add", "Edit", "Delete"],
    "Manager": ["View", "Add", "Edit"],
    "Staff": ["View", "Add"],
    "Customer": ["View"],
}


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('password_hash', sa.Text(), nullable=False),
    )
    roles = op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name_role', sa.String(50), nullable=False, unique=True),
    )
    permissions = op.create_table(
        'permissions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name_permission', sa.String(20), nullable=False),
        sa.Column('module', sa.String(100), nullable=False),
    )
    op.create_table(
        'user_roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('id_user', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('id_role', sa.Integer(), sa.ForeignKey('roles.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('id_user', 'id_role', name='uq_user_role'),
    )
    op.create_table(
        'role_permissions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('id_role', sa.Integer(), sa.ForeignKey('roles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('id_permission', sa.Integer(), sa.ForeignKey('permissions.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('id_role', 'id_permission', name='uq_role_permission'),
    )
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('item', sa.String(500), nullable=False),
        sa.Column('customer_name', sa.String(100), nullable=False),
        sa.Column('customer_phone', sa.String(20), nullable=True),
        sa.Column('customer_email', sa.String(100), nullable=True),
        sa.Column('customer_address', sa.String(255), nullable=True),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('idx_orders_created_at', 'orders', ['created_at'])
    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('email', sa.String(100), nullable=True),
        sa.Column('address', sa.String(255), nullable=True),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('idx_customers_created_at', 'customers', ['created_at'])

    # Seed: papéis, permissões e matriz inicial
    op.bulk_insert(roles, [{"name_role": name} for name in ROLES])
    op.bulk_insert(permissions, [
        {"name_permission": action, "module": module}
        for module in MODULES
        for action in ACTIONS
    ])

    conn = op.get_bind()
    for role, actions in ROLE_ACTIONS.items():
        for module in MODULES:
            for action in actions:
                conn.execute(
                    sa.text(
                        "INSERT INTO role_permissions (id_role, id_permission) "
                        "SELECT r.id, p.id FROM roles r, permissions p "
                        "WHERE r.name_role = :role AND p.name_permission = :action AND p.module = :module"
                    ),
                    {"role": role, "action": action, "module": module},
                )


def downgrade() -> None:
    op.drop_index('idx_customers_created_at', table_name='customers')
    op.drop_table('customers')
    op.drop_index('idx_orders_created_at', table_name='orders')
    op.drop_table('orders')
    op.drop_table('role_permissions')
    op.drop_table('user_roles')
    op.drop_table('permissions')
    op.drop_table('roles')
    op.drop_table('users')
