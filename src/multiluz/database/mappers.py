"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the domain entities do not
change when the storage schema does.
"""

from multiluz.domain import entities as domain
from multiluz.database.models import (
    Order as ORMOrder,
    Payment as ORMPayment,
    Salesperson as ORMSalesperson,
    UserProfile as ORMUserProfile,
    Commission as ORMCommission,
)


def order_to_domain(orm_order: ORMOrder) -> domain.Order:
    """Convert SQLAlchemy Order model to domain Order entity."""
    return domain.Order(
        id=orm_order.id,
        customer_name=orm_order.customer_name,
        consultant=orm_order.consultant,
        insurance=orm_order.insurance,
        order_value=orm_order.order_value,
        initial_payment_percentage=orm_order.initial_payment_percentage,
        down_payment_percentage=orm_order.down_payment_percentage,
        down_payment_due_date=orm_order.down_payment_due_date,
        city=orm_order.city,
        contract_creation_date=orm_order.contract_creation_date,
        contract_signature_date=orm_order.contract_signature_date,
        payment_method=orm_order.payment_method,
        origin=orm_order.origin,
        prospected_by=orm_order.prospected_by,
        cancellation_date=orm_order.cancellation_date,
        order_status=orm_order.order_status,
    )


def payment_to_domain(orm_payment: ORMPayment) -> domain.Payment:
    """Convert SQLAlchemy Payment model to domain Payment entity."""
    return domain.Payment(
        id=orm_payment.id,
        order_id=orm_payment.order_id,
        payment_date=orm_payment.payment_date,
        value=orm_payment.value,
    )


def salesperson_to_domain(orm_salesperson: ORMSalesperson) -> domain.Salesperson:
    """Convert SQLAlchemy Salesperson model to domain Salesperson entity."""
    return domain.Salesperson(
        id=orm_salesperson.id,
        name=orm_salesperson.name,
        business_unit=orm_salesperson.business_unit,
        sales_goal=orm_salesperson.sales_goal,
        level=orm_salesperson.level,
        hire_date=orm_salesperson.hire_date,
    )


def user_profile_to_domain(orm_profile: ORMUserProfile) -> domain.UserProfile:
    """Convert SQLAlchemy UserProfile model to domain UserProfile entity."""
    return domain.UserProfile(
        id=orm_profile.id,
        name=orm_profile.name,
        email=orm_profile.email,
        role=domain.UserRole(orm_profile.role),
    )


def commission_to_domain(orm_commission: ORMCommission) -> domain.Commission:
    """Convert SQLAlchemy Commission model to domain Commission entity."""
    return domain.Commission(
        id=orm_commission.id,
        order_id=orm_commission.order_id,
        commission_rate=orm_commission.commission_rate,
        status=domain.CommissionStatus(orm_commission.status),
        payment_date=orm_commission.payment_date,
    )
