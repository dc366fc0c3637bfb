"""create pricing_rules table

Revision ID: 3b7e1c9a5d20
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b7e1c9a5d20"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pricing_rules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("destination", sa.Text(), nullable=False),
        sa.Column("base_price", sa.Numeric(18, 6), nullable=False),
        sa.Column("seasonality_factor", sa.Numeric(18, 6), server_default=sa.text("1"), nullable=False),
        sa.Column("demand_multiplier", sa.Numeric(18, 6), server_default=sa.text("1"), nullable=False),
        sa.Column("early_bird_discount", sa.Numeric(18, 6), server_default=sa.text("0"), nullable=False),
        sa.Column("last_minute_discount", sa.Numeric(18, 6), server_default=sa.text("0"), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # One rule per destination
    op.create_index("ix_pricing_rules_destination", "pricing_rules", ["destination"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_pricing_rules_destination", table_name="pricing_rules")
    op.drop_table("pricing_rules")
