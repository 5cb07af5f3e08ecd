"""create account, account user and transaction tables

Revision ID: 3f9c1d2e7a40
Revises: 
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c1d2e7a40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "account_users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )

    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("account_user_id", sa.Integer(), sa.ForeignKey("account_users.id"), nullable=False),
        sa.Column("account_number", sa.String(length=10), nullable=False),
        sa.Column("account_status", sa.String(length=20), nullable=False, server_default="IN_USE"),
        sa.Column("balance", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("registered_at", sa.DateTime(timezone=True)),
        sa.Column("unregistered_at", sa.DateTime(timezone=True)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.CheckConstraint("balance >= 0", name="ck_accounts_non_negative_balance"),
    )
    op.create_index("ix_accounts_account_user_id", "accounts", ["account_user_id"])
    op.create_index("ix_accounts_account_number", "accounts", ["account_number"], unique=True)

    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("transaction_id", sa.String(length=32), nullable=False),
        sa.Column("transaction_type", sa.String(length=10), nullable=False),
        sa.Column("transaction_result_type", sa.String(length=1), nullable=False),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("balance_snapshot", sa.Integer(), nullable=False),
        sa.Column("transacted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_transactions_transaction_id", "transactions", ["transaction_id"], unique=True)
    op.create_index("ix_transactions_account_id", "transactions", ["account_id"])


def downgrade() -> None:
    op.drop_index("ix_transactions_account_id", table_name="transactions")
    op.drop_index("ix_transactions_transaction_id", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_accounts_account_number", table_name="accounts")
    op.drop_index("ix_accounts_account_user_id", table_name="accounts")
    op.drop_table("accounts")
    op.drop_table("account_users")
