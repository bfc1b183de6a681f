"""Order domain service."""

import dataclasses
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from multiluz.database.base import Database
from multiluz.domain.derivation import derive_order, derive_orders
from multiluz.domain.entities import (
    CalculatedOrder,
    Order,
    OrderStatus,
    PaymentStatus,
    UserProfile,
)
from multiluz.domain.errors import NotFoundError, ValidationError, record_not_found
from multiluz.domain.visibility import scope_orders

logger = logging.getLogger(__name__)

ORDER_FIELDS = tuple(f.name for f in dataclasses.fields(Order) if f.name != "id")


class OrderService:
    """Service for managing orders and reading their derived state."""

    def __init__(self, db: Database):
        """Initialize order service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_order(
        self,
        customer_name: str,
        consultant: str,
        order_value: Decimal,
        initial_payment_percentage: Decimal,
        down_payment_percentage: Decimal,
        down_payment_due_date: date,
        contract_creation_date: date,
        contract_signature_date: date,
        insurance: bool = False,
        city: str = "",
        payment_method: str = "",
        origin: str = "",
        prospected_by: str = "",
        cancellation_date: Optional[date] = None,
        order_status: str = OrderStatus.ACTIVE.value,
    ) -> str:
        """Create an order.

        Args:
            customer_name: Customer name
            consultant: Name of the salesperson credited with the sale
            order_value: Total contract value
            initial_payment_percentage: Initial payment milestone as a fraction
            down_payment_percentage: Down payment milestone as a fraction
            down_payment_due_date: When the down payment is due
            contract_creation_date: Date the contract was generated
            contract_signature_date: Date the contract was signed
            insurance: Whether the order includes insurance
            city: Customer city
            payment_method: Payment method label
            origin: Order origin label
            prospected_by: Who prospected the customer
            cancellation_date: Optional cancellation date
            order_status: Order status label

        Returns:
            Order ID

        Raises:
            ValidationError: If customer name or consultant is blank
        """
        fields = dict(
            customer_name=customer_name,
            consultant=consultant,
            insurance=insurance,
            order_value=order_value,
            initial_payment_percentage=initial_payment_percentage,
            down_payment_percentage=down_payment_percentage,
            down_payment_due_date=down_payment_due_date,
            city=city,
            contract_creation_date=contract_creation_date,
            contract_signature_date=contract_signature_date,
            payment_method=payment_method,
            origin=origin,
            prospected_by=prospected_by,
            cancellation_date=cancellation_date,
            order_status=order_status,
        )
        self._validate(fields)
        order_id = self.db.create_order(**fields)
        logger.info("Created order %s for %s", order_id, customer_name)
        return order_id

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get order by ID."""
        return self.db.get_order(order_id)

    def list_orders(self) -> list[Order]:
        """List all orders."""
        return self.db.list_orders()

    def update_order(self, order_id: str, **changes: Any) -> Order:
        """Replace an order with an edited copy.

        Only the given fields change; the order is then written back whole.

        Returns:
            The updated order

        Raises:
            NotFoundError: If the order does not exist
            ValidationError: If a field name is unknown or a value is invalid
        """
        order = self.db.get_order(order_id)
        if order is None:
            raise NotFoundError(record_not_found("Order", order_id))

        unknown = set(changes) - set(ORDER_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown order fields: {', '.join(sorted(unknown))}")

        updated = dataclasses.replace(order, **changes)
        fields = {name: getattr(updated, name) for name in ORDER_FIELDS}
        self._validate(fields)
        self.db.update_order(order_id, **fields)
        logger.info("Updated order %s (%s)", order_id, ", ".join(sorted(changes)) or "no changes")
        return updated

    def get_calculated_order(
        self, order_id: str, today: Optional[date] = None
    ) -> Optional[CalculatedOrder]:
        """Get an order with its derived financial state.

        Returns:
            CalculatedOrder or None if the order does not exist
        """
        order = self.db.get_order(order_id)
        if order is None:
            return None
        return derive_order(order, self.db.list_payments(order_id=order_id), today)

    def list_calculated_orders(
        self,
        user: Optional[UserProfile] = None,
        today: Optional[date] = None,
        search: Optional[str] = None,
        payment_status: Optional[PaymentStatus] = None,
        consultant: Optional[str] = None,
    ) -> list[CalculatedOrder]:
        """List orders with their derived financial state.

        Args:
            user: Acting profile; salespeople only see their own orders
            today: Reference date for the overdue rule
            search: Case-insensitive text matched against customer, ID and consultant
            payment_status: Only orders with this derived status
            consultant: Only orders credited to this consultant

        Returns:
            List of calculated orders in creation order
        """
        calculated = derive_orders(self.db.list_orders(), self.db.list_payments(), today)
        if user is not None:
            calculated = scope_orders(calculated, user)

        if search:
            term = search.lower()
            calculated = [
                c
                for c in calculated
                if term in c.customer_name.lower()
                or term in c.id.lower()
                or term in c.consultant.lower()
            ]
        if payment_status is not None:
            calculated = [c for c in calculated if c.payment_status == payment_status]
        if consultant is not None:
            calculated = [c for c in calculated if c.consultant == consultant]
        return calculated

    def _validate(self, fields: dict[str, Any]) -> None:
        if not str(fields["customer_name"]).strip():
            raise ValidationError("Customer name is required")
        if not str(fields["consultant"]).strip():
            raise ValidationError("Consultant is required")
