"""Payment domain service."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from multiluz.database.base import Database
from multiluz.domain.derivation import MISSING_ORDER_LABEL
from multiluz.domain.entities import Payment, UserProfile
from multiluz.domain.errors import NotFoundError, ValidationError, record_not_found
from multiluz.domain.visibility import scope_orders, scope_payments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentListing:
    """Payment with the customer and consultant of its order."""

    payment: Payment
    customer_name: str
    consultant: str


class PaymentService:
    """Service for recording and managing received payments."""

    def __init__(self, db: Database):
        """Initialize payment service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_payment(self, order_id: str, payment_date: date, value: Decimal) -> str:
        """Record a payment against an order.

        Args:
            order_id: Order the payment belongs to
            payment_date: Date the payment was received
            value: Amount received

        Returns:
            Payment ID

        Raises:
            NotFoundError: If the order does not exist
            ValidationError: If the value is not positive
        """
        if self.db.get_order(order_id) is None:
            raise NotFoundError(record_not_found("Order", order_id))
        self._validate_value(value)

        payment_id = self.db.create_payment(
            order_id=order_id, payment_date=payment_date, value=value
        )
        logger.info("Recorded payment %s of %s for order %s", payment_id, value, order_id)
        return payment_id

    def get_payment(self, payment_id: str) -> Optional[Payment]:
        """Get payment by ID."""
        return self.db.get_payment(payment_id)

    def list_payments(
        self, order_id: Optional[str] = None, user: Optional[UserProfile] = None
    ) -> list[Payment]:
        """List payments, optionally for a single order and scoped to a user."""
        payments = self.db.list_payments(order_id=order_id)
        if user is None:
            return payments
        visible_orders = scope_orders(self.db.list_orders(), user)
        return scope_payments(payments, visible_orders, user)

    def list_payment_listings(
        self, user: Optional[UserProfile] = None, search: Optional[str] = None
    ) -> list[PaymentListing]:
        """List payments newest first with their order's customer and consultant.

        Payments whose order cannot be found are labelled "N/A".

        Args:
            user: Acting profile; salespeople only see payments of their orders
            search: Case-insensitive text matched against customer, order ID,
                consultant and payment ID
        """
        orders = {o.id: o for o in self.db.list_orders()}
        listings = []
        for payment in self.list_payments(user=user):
            order = orders.get(payment.order_id)
            listings.append(
                PaymentListing(
                    payment=payment,
                    customer_name=order.customer_name if order else MISSING_ORDER_LABEL,
                    consultant=order.consultant if order else MISSING_ORDER_LABEL,
                )
            )
        listings.sort(key=lambda item: item.payment.payment_date, reverse=True)

        if search:
            term = search.lower()
            listings = [
                item
                for item in listings
                if term in item.customer_name.lower()
                or term in item.payment.order_id.lower()
                or term in item.consultant.lower()
                or term in item.payment.id.lower()
            ]
        return listings

    def update_payment(
        self,
        payment_id: str,
        payment_date: Optional[date] = None,
        value: Optional[Decimal] = None,
    ) -> None:
        """Update a payment's date and/or value.

        Raises:
            NotFoundError: If the payment does not exist
            ValidationError: If the new value is not positive
        """
        payment = self.db.get_payment(payment_id)
        if payment is None:
            raise NotFoundError(record_not_found("Payment", payment_id))
        if value is not None:
            self._validate_value(value)

        self.db.update_payment(
            payment_id,
            payment_date=payment_date if payment_date is not None else payment.payment_date,
            value=value if value is not None else payment.value,
        )
        logger.info("Updated payment %s", payment_id)

    def delete_payment(self, payment_id: str) -> None:
        """Delete a payment.

        Raises:
            NotFoundError: If the payment does not exist
        """
        if self.db.get_payment(payment_id) is None:
            raise NotFoundError(record_not_found("Payment", payment_id))
        self.db.delete_payment(payment_id)
        logger.info("Deleted payment %s", payment_id)

    @staticmethod
    def _validate_value(value: Decimal) -> None:
        if value <= 0:
            raise ValidationError(f"Payment value must be positive, got {value}")
