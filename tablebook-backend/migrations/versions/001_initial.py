
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'reservations',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('contact', sa.String(length=255), nullable=False),
        sa.Column('date', sa.String(length=32), nullable=False),
        sa.Column('time', sa.String(length=16), nullable=False),
        sa.Column('slot', sa.String(length=32), nullable=False),
        sa.Column('guests', sa.Integer(), nullable=False),
        sa.Column('payment_method', sa.String(length=16), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_reservations_contact', 'reservations', ['contact'])
    op.create_index('ix_reservations_date', 'reservations', ['date'])

def downgrade():
    op.drop_index('ix_reservations_date', table_name='reservations')
    op.drop_index('ix_reservations_contact', table_name='reservations')
    op.drop_table('reservations')
