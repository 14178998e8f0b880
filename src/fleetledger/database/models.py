"""SQLAlchemy models for fleetledger database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    CheckConstraint,
    Column,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(UTC)


class Vehicle(Base):
    """Vehicle model. Owns its transactions."""

    __tablename__ = "vehicles"

    id = Column(String, primary_key=True, default=_new_id)
    vehicle_number = Column(String, unique=True, nullable=False)
    make = Column(String, nullable=True)
    model = Column(String, nullable=True)
    status = Column(String, default="active", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    transactions = relationship(
        "VehicleTransaction", back_populates="vehicle", cascade="all, delete-orphan"
    )


class Employee(Base):
    """Employee model."""

    __tablename__ = "employees"

    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class Invoice(Base):
    """Invoice model (reference only)."""

    __tablename__ = "invoices"

    id = Column(String, primary_key=True, default=_new_id)
    number = Column(String, unique=True, nullable=False)
    customer_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)


class PurchaseOrder(Base):
    """Purchase order model (reference only)."""

    __tablename__ = "purchase_orders"

    id = Column(String, primary_key=True, default=_new_id)
    number = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class Quote(Base):
    """Quote model (reference only)."""

    __tablename__ = "quotes"

    id = Column(String, primary_key=True, default=_new_id)
    number = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class VehicleTransaction(Base):
    """Vehicle revenue or expense event."""

    __tablename__ = "vehicle_transactions"

    id = Column(String, primary_key=True, default=_new_id)
    vehicle_id = Column(String, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)
    transaction_type = Column(String, nullable=False)
    category = Column(String, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False)
    month = Column(String(7), nullable=False)
    description = Column(String, nullable=True)
    employee_id = Column(String, ForeignKey("employees.id"), nullable=True)
    invoice_id = Column(String, ForeignKey("invoices.id"), nullable=True)
    purchase_order_id = Column(String, ForeignKey("purchase_orders.id"), nullable=True)
    quote_id = Column(String, ForeignKey("quotes.id"), nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, onupdate=_now, nullable=False)

    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transaction_amount_positive"),
        CheckConstraint(
            "transaction_type IN ('revenue', 'expense')", name="ck_transaction_type"
        ),
        Index("ix_vehicle_transactions_vehicle", "vehicle_id"),
        Index("ix_vehicle_transactions_vehicle_month", "vehicle_id", "month"),
        Index("ix_vehicle_transactions_month", "month"),
    )

    # Relationships
    vehicle = relationship("Vehicle", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
