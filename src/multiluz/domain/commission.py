"""Commission domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from multiluz.database.base import Database
from multiluz.domain.derivation import derive_commission, derive_orders, sort_commissions
from multiluz.domain.entities import (
    CalculatedCommission,
    Commission,
    CommissionStatus,
    Order,
)
from multiluz.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    order_already_commissioned,
    record_not_found,
)

logger = logging.getLogger(__name__)


def commission_totals(commissions: Iterable[CalculatedCommission]) -> tuple[Decimal, Decimal]:
    """Return (total order value, total commission value) of a list."""
    total_order_value = Decimal("0")
    total_commission_value = Decimal("0")
    for c in commissions:
        total_order_value += c.order_value
        total_commission_value += c.commission_value
    return total_order_value, total_commission_value


class CommissionService:
    """Service for managing commissions."""

    def __init__(self, db: Database):
        """Initialize commission service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_commission(
        self,
        order_id: str,
        commission_rate: Decimal,
        status: CommissionStatus = CommissionStatus.PENDING,
        payment_date: Optional[date] = None,
    ) -> str:
        """Create a commission for an order.

        Args:
            order_id: Order the commission is paid on
            commission_rate: Fraction of the order value (0.05 for 5%)
            status: Pending or Paid
            payment_date: Required when status is Paid, ignored otherwise

        Returns:
            Commission ID

        Raises:
            NotFoundError: If the order does not exist
            ConflictError: If the order already has a commission
            ValidationError: If a Paid commission has no payment date
        """
        if self.db.get_order(order_id) is None:
            raise NotFoundError(record_not_found("Order", order_id))
        self._check_order_free(order_id, commission_id=None)
        payment_date = self._normalize_payment_date(status, payment_date)

        commission_id = self.db.create_commission(
            order_id=order_id,
            commission_rate=commission_rate,
            status=status,
            payment_date=payment_date,
        )
        logger.info("Created commission %s for order %s", commission_id, order_id)
        return commission_id

    def get_commission(self, commission_id: str) -> Optional[Commission]:
        """Get commission by ID."""
        return self.db.get_commission(commission_id)

    def update_commission(
        self,
        commission_id: str,
        order_id: Optional[str] = None,
        commission_rate: Optional[Decimal] = None,
        status: Optional[CommissionStatus] = None,
        payment_date: Optional[date] = None,
    ) -> None:
        """Update a commission.

        Fields left as None keep their current value, except that switching
        to Pending always clears the payment date.

        Raises:
            NotFoundError: If the commission or the new order does not exist
            ConflictError: If the new order already has another commission
            ValidationError: If the result is Paid without a payment date
        """
        commission = self.db.get_commission(commission_id)
        if commission is None:
            raise NotFoundError(record_not_found("Commission", commission_id))

        new_order_id = order_id if order_id is not None else commission.order_id
        if new_order_id != commission.order_id:
            if self.db.get_order(new_order_id) is None:
                raise NotFoundError(record_not_found("Order", new_order_id))
            self._check_order_free(new_order_id, commission_id=commission_id)

        new_status = status if status is not None else commission.status
        new_date = payment_date if payment_date is not None else commission.payment_date

        self.db.update_commission(
            commission_id,
            order_id=new_order_id,
            commission_rate=(
                commission_rate if commission_rate is not None else commission.commission_rate
            ),
            status=new_status,
            payment_date=self._normalize_payment_date(new_status, new_date),
        )
        logger.info("Updated commission %s", commission_id)

    def delete_commission(self, commission_id: str) -> None:
        """Delete a commission.

        Raises:
            NotFoundError: If the commission does not exist
        """
        if self.db.get_commission(commission_id) is None:
            raise NotFoundError(record_not_found("Commission", commission_id))
        self.db.delete_commission(commission_id)
        logger.info("Deleted commission %s", commission_id)

    def list_calculated_commissions(
        self,
        consultant: Optional[str] = None,
        status: Optional[CommissionStatus] = None,
        today: Optional[date] = None,
    ) -> list[CalculatedCommission]:
        """List commissions with their order data, highest order value first.

        Args:
            consultant: Only commissions of this consultant
            status: Only commissions with this status
            today: Reference date passed to the order derivation
        """
        calculated_orders = {
            c.id: c for c in derive_orders(self.db.list_orders(), self.db.list_payments(), today)
        }
        calculated = [derive_commission(c, calculated_orders) for c in self.db.list_commissions()]

        if consultant is not None:
            calculated = [c for c in calculated if c.consultant == consultant]
        if status is not None:
            calculated = [c for c in calculated if c.status == status]
        return sort_commissions(calculated)

    def selectable_orders(
        self, commission_id: Optional[str] = None, search: Optional[str] = None
    ) -> list[Order]:
        """List orders that a commission can be attached to.

        Orders that already have a commission are left out, except the
        order of the commission being edited.

        Args:
            commission_id: Commission being edited, or None when creating
            search: Case-insensitive text matched against customer and order ID
        """
        taken = {
            c.order_id for c in self.db.list_commissions() if c.id != commission_id
        }
        orders = [o for o in self.db.list_orders() if o.id not in taken]
        if search:
            term = search.lower()
            orders = [
                o for o in orders if term in o.customer_name.lower() or term in o.id.lower()
            ]
        return orders

    def _check_order_free(self, order_id: str, commission_id: Optional[str]) -> None:
        for existing in self.db.list_commissions():
            if existing.order_id == order_id and existing.id != commission_id:
                raise ConflictError(order_already_commissioned(order_id))

    @staticmethod
    def _normalize_payment_date(
        status: CommissionStatus, payment_date: Optional[date]
    ) -> Optional[date]:
        if status == CommissionStatus.PAID:
            if payment_date is None:
                raise ValidationError("A paid commission needs a payment date")
            return payment_date
        return None
