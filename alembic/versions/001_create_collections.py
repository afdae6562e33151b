"""001: create collections table

The stats updater writes these rows; this service only reads them.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE collections (
            id                          BIGSERIAL       PRIMARY KEY,
            collection_owner            TEXT            NOT NULL,
            collection_name             TEXT,
            token_symbol                TEXT,
            chain_id                    BIGINT,
            total_supply                BIGINT,
            listed_count                BIGINT,
            floor_price                 NUMERIC(78, 18),
            market_cap                  NUMERIC(78, 18),
            opensea_data_updated_at     TIMESTAMPTZ,
            created_at                  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at                  TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_collections_owner             UNIQUE (collection_owner),
            CONSTRAINT ck_collections_owner_lower       CHECK (collection_owner = LOWER(collection_owner)),
            CONSTRAINT ck_collections_supply_gte_0      CHECK (total_supply IS NULL OR total_supply >= 0),
            CONSTRAINT ck_collections_listed_gte_0      CHECK (listed_count IS NULL OR listed_count >= 0),
            CONSTRAINT ck_collections_floor_gte_0       CHECK (floor_price IS NULL OR floor_price >= 0)
        );
    """)
    op.execute("COMMENT ON TABLE collections IS 'Collection stats cache — written by the stats updater, read by /stats';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS collections CASCADE;")
