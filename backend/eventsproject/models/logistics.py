"""Logistics ORM — persists logistics items and their pricing."""

from sqlalchemy import Boolean, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from eventsproject.db.base import Base


class Logistics(Base):
    """Logistics row — cost contribution is unit_price * quantity when reserved."""
    __tablename__ = "logistics"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    reserved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
