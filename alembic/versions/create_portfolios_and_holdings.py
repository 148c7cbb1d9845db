"""create portfolios and holdings tables

Revision ID: create_portfolios_and_holdings
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "create_portfolios_and_holdings"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "portfolios",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_identity", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_portfolios_id", "portfolios", ["id"])
    op.create_index("ix_portfolios_owner_identity", "portfolios", ["owner_identity"], unique=True)

    op.create_table(
        "holdings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("portfolio_id", sa.Integer(), nullable=False),
        sa.Column("symbol", sa.String(length=20), nullable=False),
        sa.Column("shares", sa.Numeric(20, 8), nullable=False),
        sa.Column("purchase_date", sa.Date(), nullable=False),
        sa.Column(
            "purchase_price", sa.Numeric(15, 4), nullable=False, comment="Price per share paid"
        ),
        sa.Column("sector", sa.String(length=100), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["portfolio_id"], ["portfolios.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_holdings_id", "holdings", ["id"])
    op.create_index("idx_holdings_portfolio", "holdings", ["portfolio_id"])
    op.create_index("idx_holdings_symbol", "holdings", ["symbol"])


def downgrade():
    op.drop_index("idx_holdings_symbol", table_name="holdings")
    op.drop_index("idx_holdings_portfolio", table_name="holdings")
    op.drop_index("ix_holdings_id", table_name="holdings")
    op.drop_table("holdings")
    op.drop_index("ix_portfolios_owner_identity", table_name="portfolios")
    op.drop_index("ix_portfolios_id", table_name="portfolios")
    op.drop_table("portfolios")
