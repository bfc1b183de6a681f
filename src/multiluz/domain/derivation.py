"""Derived financial state for orders, commissions and sales goals.

Everything here is a pure function of its arguments: callers pass the
records they read from the store and get a fresh projection back. Nothing
is cached and nothing raises for odd business data (zero-value orders,
dangling references); each input maps to a defined output.
"""

from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from multiluz.domain.entities import (
    CalculatedCommission,
    CalculatedOrder,
    Commission,
    GoalAttainment,
    Order,
    OrderStatus,
    Payment,
    PaymentStatus,
    Salesperson,
)
from multiluz.utils.date_parser import current_date

OVERDUE_GRACE_DAYS = 3
MILESTONE_80_RATIO = Decimal("0.8")
MISSING_ORDER_LABEL = "N/A"

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def get_payment_status(
    order: Order,
    received: Decimal,
    current_balance: Decimal,
    payment_count: int,
    today: date,
) -> PaymentStatus:
    """Classify an order's collection health.

    Rules are checked in order; the first match wins:

    1. Cancelled orders are always CANCELLED.
    2. No payments and the down payment due more than three days ago: OVERDUE.
    3. Nothing left to pay on a non-zero order: CONFIRMED.
    4. Anything received: PARTIAL.
    5. Otherwise PENDING.
    """
    if order.order_status == OrderStatus.CANCELLED:
        return PaymentStatus.CANCELLED

    overdue_cutoff = today - timedelta(days=OVERDUE_GRACE_DAYS)
    if order.down_payment_due_date < overdue_cutoff and payment_count == 0:
        return PaymentStatus.OVERDUE

    if current_balance <= 0 and order.order_value > 0:
        return PaymentStatus.CONFIRMED

    if received > 0:
        return PaymentStatus.PARTIAL

    return PaymentStatus.PENDING


def derive_order(
    order: Order, payments: Iterable[Payment], today: Optional[date] = None
) -> CalculatedOrder:
    """Compute received amount, balance, milestones and status for an order.

    Args:
        order: Order to derive
        payments: Payments to consider; payments of other orders are ignored
        today: Reference date for the overdue rule (defaults to the current
            date in the configured timezone)

    Returns:
        CalculatedOrder projection
    """
    if today is None:
        today = current_date()

    related = [p for p in payments if p.order_id == order.id]
    received = sum((p.value for p in related), ZERO)
    current_balance = order.order_value - received
    down_payment_goal = order.order_value * order.down_payment_percentage
    initial_payment_value = order.order_value * order.initial_payment_percentage
    threshold_80 = order.order_value * MILESTONE_80_RATIO

    # sorted() is stable, so same-day payments keep insertion order
    ordered = sorted(related, key=lambda p: p.payment_date)

    cumulative = ZERO
    initial_payment_date = None
    payment_date_80 = None
    payment_date_100 = None
    for payment in ordered:
        cumulative += payment.value
        if initial_payment_date is None and cumulative >= initial_payment_value:
            initial_payment_date = payment.payment_date
        if payment_date_80 is None and cumulative >= threshold_80:
            payment_date_80 = payment.payment_date
        if payment_date_100 is None and cumulative >= order.order_value:
            payment_date_100 = payment.payment_date

    return CalculatedOrder(
        order=order,
        received=received,
        current_balance=current_balance,
        down_payment_goal=down_payment_goal,
        initial_payment_value=initial_payment_value,
        first_payment_date=ordered[0].payment_date if ordered else None,
        initial_payment_date=initial_payment_date,
        payment_date_80=payment_date_80,
        payment_date_100=payment_date_100,
        payment_status=get_payment_status(
            order, received, current_balance, len(related), today
        ),
    )


def derive_orders(
    orders: Sequence[Order], payments: Iterable[Payment], today: Optional[date] = None
) -> list[CalculatedOrder]:
    """Derive every order, grouping payments by order first."""
    if today is None:
        today = current_date()

    by_order: dict[str, list[Payment]] = defaultdict(list)
    for payment in payments:
        by_order[payment.order_id].append(payment)

    return [derive_order(order, by_order.get(order.id, []), today) for order in orders]


def derive_commission(
    commission: Commission, calculated_orders: Mapping[str, CalculatedOrder]
) -> CalculatedCommission:
    """Join a commission with its order and compute the commission value.

    A commission whose order no longer exists is shown with "N/A" labels
    and a zero order value.
    """
    calculated = calculated_orders.get(commission.order_id)
    if calculated is None:
        customer_name = MISSING_ORDER_LABEL
        consultant = MISSING_ORDER_LABEL
        order_value = ZERO
    else:
        customer_name = calculated.customer_name
        consultant = calculated.consultant
        order_value = calculated.order_value

    return CalculatedCommission(
        commission=commission,
        customer_name=customer_name,
        consultant=consultant,
        order_value=order_value,
        commission_value=order_value * commission.commission_rate,
    )


def sort_commissions(
    commissions: Iterable[CalculatedCommission],
) -> list[CalculatedCommission]:
    """Sort by order value, highest first; ties keep their original order."""
    return sorted(commissions, key=lambda c: c.order_value, reverse=True)


def derive_goal_attainment(
    orders: Iterable[Order],
    salespeople: Iterable[Salesperson],
    month: int,
    year: int,
) -> list[GoalAttainment]:
    """Compare each salesperson's signed sales in a month with their goal.

    Only orders signed within the reference month and not cancelled count.
    The percentage is kept within [0, 100] and is 0 when no goal is set.
    """
    monthly_orders = [
        o
        for o in orders
        if o.contract_signature_date.month == month
        and o.contract_signature_date.year == year
        and o.order_status != OrderStatus.CANCELLED
    ]

    rows = []
    for person in salespeople:
        monthly_sales = sum(
            (o.order_value for o in monthly_orders if o.consultant == person.name),
            ZERO,
        )
        if person.sales_goal > 0:
            ratio = HUNDRED * monthly_sales / person.sales_goal
            percentage = max(ZERO, min(HUNDRED, ratio))
        else:
            percentage = ZERO
        rows.append(
            GoalAttainment(
                name=person.name,
                monthly_sales=monthly_sales,
                sales_goal=person.sales_goal,
                percentage=percentage,
            )
        )

    return sorted(rows, key=lambda row: row.monthly_sales, reverse=True)
