"""SQLAlchemy models for multiluz database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class IdSequence(Base):
    """Last identifier handed out per prefix (ORD, PAY, ...)."""

    __tablename__ = "id_sequences"

    prefix = Column(String, primary_key=True)
    last_value = Column(Integer, default=0, nullable=False)


class Salesperson(Base):
    """Salesperson model."""

    __tablename__ = "salespeople"

    id = Column(String, primary_key=True)
    seq = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    business_unit = Column(String, nullable=False)
    sales_goal = Column(Numeric(14, 2), nullable=False)
    level = Column(String, nullable=False)
    hire_date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Order(Base):
    """Order model."""

    __tablename__ = "orders"

    id = Column(String, primary_key=True)
    seq = Column(Integer, nullable=False)
    customer_name = Column(String, nullable=False)
    consultant = Column(String, nullable=False)
    insurance = Column(Boolean, default=False, nullable=False)
    order_value = Column(Numeric(14, 2), nullable=False)
    initial_payment_percentage = Column(Numeric(7, 4), nullable=False)
    down_payment_percentage = Column(Numeric(7, 4), nullable=False)
    down_payment_due_date = Column(Date, nullable=False)
    city = Column(String, nullable=False, default="")
    contract_creation_date = Column(Date, nullable=False)
    contract_signature_date = Column(Date, nullable=False)
    payment_method = Column(String, nullable=False, default="")
    origin = Column(String, nullable=False, default="")
    prospected_by = Column(String, nullable=False, default="")
    cancellation_date = Column(Date, nullable=True)
    order_status = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    payments = relationship("Payment", back_populates="order")


class Payment(Base):
    """Payment model."""

    __tablename__ = "payments"

    id = Column(String, primary_key=True)
    seq = Column(Integer, nullable=False)
    order_id = Column(String, ForeignKey("orders.id"), nullable=False)
    payment_date = Column(Date, nullable=False)
    value = Column(Numeric(14, 2), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="payments")


class UserProfile(Base):
    """User profile model."""

    __tablename__ = "user_profiles"

    id = Column(String, primary_key=True)
    seq = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    role = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Commission(Base):
    """Commission model."""

    __tablename__ = "commissions"

    id = Column(String, primary_key=True)
    seq = Column(Integer, nullable=False)
    # Plain column: a commission may outlive a dangling order reference
    order_id = Column(String, nullable=False)
    commission_rate = Column(Numeric(7, 4), nullable=False)
    status = Column(String, nullable=False)
    payment_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class ConfigItem(Base):
    """One entry of a configurable lookup list."""

    __tablename__ = "config_items"

    id = Column(Integer, primary_key=True)
    list_name = Column(String, nullable=False)
    value = Column(String, nullable=False)
    position = Column(Integer, nullable=False)

    __table_args__ = (UniqueConstraint("list_name", "value", name="uq_config_list_value"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
