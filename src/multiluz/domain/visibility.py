"""Role-based scoping of orders and payments.

Salespeople only see their own orders and the payments made against them;
admins and managers see everything. Every listing, summary and dashboard
goes through these two functions so the scope is always the same.
"""

from typing import Iterable, Protocol, Sequence, TypeVar

from multiluz.domain.entities import Payment, UserProfile, UserRole


class _ConsultantRecord(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def consultant(self) -> str: ...


OrderT = TypeVar("OrderT", bound=_ConsultantRecord)


def scope_orders(orders: Iterable[OrderT], user: UserProfile) -> list[OrderT]:
    """Return the orders the user is allowed to see."""
    if user.role == UserRole.SALESPERSON:
        return [o for o in orders if o.consultant == user.name]
    return list(orders)


def scope_payments(
    payments: Iterable[Payment], visible_orders: Sequence[_ConsultantRecord], user: UserProfile
) -> list[Payment]:
    """Return the payments the user is allowed to see.

    Args:
        payments: All payments
        visible_orders: Orders already scoped with scope_orders()
        user: Acting profile
    """
    if user.role == UserRole.SALESPERSON:
        visible_ids = {o.id for o in visible_orders}
        return [p for p in payments if p.order_id in visible_ids]
    return list(payments)
