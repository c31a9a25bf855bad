"""Create providers table.

The table may already exist when it was imported straight from the CMS
dataset; in that case only the missing lookup indexes are added.

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None

_INDEXES = {
    "ix_providers_rndrng_prvdr_type": "rndrng_prvdr_type",
    "ix_providers_rndrng_prvdr_city": "rndrng_prvdr_city",
    "ix_providers_rndrng_prvdr_state_abrvtn": "rndrng_prvdr_state_abrvtn",
}


def upgrade() -> None:
    bind = op.get_bind()
    inspector = inspect(bind)

    if not inspector.has_table("providers"):
        op.create_table(
            "providers",
            sa.Column("rndrng_npi", sa.String(length=10), primary_key=True),
            sa.Column("rndrng_prvdr_first_name", sa.String(length=100), nullable=True),
            sa.Column("rndrng_prvdr_last_org_name", sa.String(length=200), nullable=True),
            sa.Column("rndrng_prvdr_type", sa.String(length=100), nullable=True),
            sa.Column("rndrng_prvdr_city", sa.String(length=100), nullable=True),
            sa.Column("rndrng_prvdr_state_abrvtn", sa.String(length=2), nullable=True),
            sa.Column("rndrng_prvdr_zip5", sa.String(length=5), nullable=True),
        )
        existing = set()
    else:
        existing = {idx["name"] for idx in inspector.get_indexes("providers")}

    for name, column in _INDEXES.items():
        if name not in existing:
            op.create_index(name, "providers", [column], unique=False)


def downgrade() -> None:
    for name in _INDEXES:
        op.drop_index(name, table_name="providers")
    op.drop_table("providers")
