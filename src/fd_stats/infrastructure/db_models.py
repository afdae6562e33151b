"""SQLAlchemy ORM model for the collections table.

Used for type reference only — persistence.py uses raw text() SQL.
The external stats updater owns the rows; alembic 001 is the DDL source
for local development.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import BigInteger, DateTime, Numeric, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from src.fd_common.database import Base


class CollectionORM(Base):
    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    collection_owner: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    collection_name: Mapped[str | None] = mapped_column(Text)
    token_symbol: Mapped[str | None] = mapped_column(Text)
    chain_id: Mapped[int | None] = mapped_column(BigInteger)
    total_supply: Mapped[int | None] = mapped_column(BigInteger)
    listed_count: Mapped[int | None] = mapped_column(BigInteger)
    floor_price: Mapped[Decimal | None] = mapped_column(Numeric(78, 18))
    market_cap: Mapped[Decimal | None] = mapped_column(Numeric(78, 18))
    opensea_data_updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
