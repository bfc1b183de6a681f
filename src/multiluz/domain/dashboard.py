"""Dashboard domain service."""

from collections import Counter, defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional

from multiluz.database.base import Database
from multiluz.domain.derivation import derive_orders
from multiluz.domain.entities import DashboardSummary, PaymentStatus, UserProfile
from multiluz.domain.visibility import scope_orders, scope_payments
from multiluz.utils.date_parser import current_date


class DashboardService:
    """Service for building the dashboard's headline numbers."""

    def __init__(self, db: Database):
        """Initialize dashboard service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_summary(self, user: UserProfile, today: Optional[date] = None) -> DashboardSummary:
        """Summarize the orders and payments visible to a user.

        Args:
            user: Acting profile; salespeople only see their own figures
            today: Reference date for the current month and overdue rule

        Returns:
            DashboardSummary with totals, sales per consultant (highest first)
            and order counts per payment status (statuses with no orders left out)
        """
        if today is None:
            today = current_date()

        payments = self.db.list_payments()
        orders = scope_orders(derive_orders(self.db.list_orders(), payments, today), user)
        payments = scope_payments(payments, orders, user)

        received_this_month = sum(
            (
                p.value
                for p in payments
                if p.payment_date.month == today.month and p.payment_date.year == today.year
            ),
            Decimal("0"),
        )
        total_balance = sum((o.current_balance for o in orders), Decimal("0"))

        sales: dict[str, Decimal] = defaultdict(Decimal)
        for o in orders:
            sales[o.consultant] += o.order_value
        sales_by_consultant = sorted(sales.items(), key=lambda item: item[1], reverse=True)

        status_counts = Counter(o.payment_status for o in orders)
        orders_by_status = tuple(
            (status, status_counts[status]) for status in PaymentStatus if status_counts[status]
        )

        return DashboardSummary(
            received_this_month=received_this_month,
            total_balance=total_balance,
            total_orders=len(orders),
            sales_by_consultant=tuple(sales_by_consultant),
            orders_by_status=orders_by_status,
        )
