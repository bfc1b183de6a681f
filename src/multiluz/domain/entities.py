"""Domain model entities for multiluz.

These are pure data classes representing business concepts, independent of
database schema. Derived projections (CalculatedOrder, CalculatedCommission,
GoalAttainment) are never stored and are rebuilt from the base records on
every read.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class OrderStatus(str, Enum):
    """Canonical order statuses the derivation rules depend on."""

    ACTIVE = "ATIVO"
    COMPLETED = "CONCLUÍDO"
    CANCELLED = "CANCELADO"


class PaymentStatus(str, Enum):
    """Derived collection health of an order."""

    CONFIRMED = "PAGAMENTO CONFIRMADO"
    PARTIAL = "PAGAMENTO PARCIAL"
    PENDING = "PAGAMENTO PENDENTE"
    OVERDUE = "PAGAMENTO EM ATRASO"
    CANCELLED = "CANCELADO"


class UserRole(str, Enum):
    ADMIN = "Admin/Financeiro"
    MANAGER = "Gestor"
    SALESPERSON = "Vendedor"


class CommissionStatus(str, Enum):
    PENDING = "Pendente"
    PAID = "Pago"


class View(str, Enum):
    """Screens of the back office, used for role gating."""

    DASHBOARD = "Dashboard"
    ORDERS = "Pedidos"
    PAYMENTS = "Recebimentos"
    COMMISSIONS = "Comissões"
    DETAIL = "Detalhe"
    SALESPEOPLE = "Gestão de Consultores"
    PROFILES = "Gestão de Perfis"
    SETTINGS = "Configurações"


class Action(str, Enum):
    """Record changes that are gated by role on top of view access."""

    CREATE_ORDER = "create orders"
    EDIT_ORDER = "edit orders"
    RECORD_PAYMENT = "record payments"
    EDIT_PAYMENT = "edit payments"
    DELETE_PAYMENT = "delete payments"


class ConfigList(str, Enum):
    """Keys of the configurable lookup lists."""

    BUSINESS_UNITS = "business_units"
    PAYMENT_METHODS = "payment_methods"
    ORDER_ORIGINS = "order_origins"
    SALESPERSON_LEVELS = "salesperson_levels"
    ORDER_STATUSES = "order_statuses"


@dataclass(frozen=True)
class Order:
    """Sale contract domain entity."""

    id: str
    customer_name: str
    consultant: str
    insurance: bool
    order_value: Decimal
    initial_payment_percentage: Decimal
    down_payment_percentage: Decimal
    down_payment_due_date: date
    city: str
    contract_creation_date: date
    contract_signature_date: date
    payment_method: str
    origin: str
    prospected_by: str
    cancellation_date: Optional[date]
    order_status: str


@dataclass(frozen=True)
class Payment:
    """Installment received against an order."""

    id: str
    order_id: str
    payment_date: date
    value: Decimal


@dataclass(frozen=True)
class CalculatedOrder:
    """Order joined with the financial state derived from its payments."""

    order: Order
    received: Decimal
    current_balance: Decimal
    down_payment_goal: Decimal
    initial_payment_value: Decimal
    first_payment_date: Optional[date]
    initial_payment_date: Optional[date]
    payment_date_80: Optional[date]
    payment_date_100: Optional[date]
    payment_status: PaymentStatus

    @property
    def id(self) -> str:
        return self.order.id

    @property
    def customer_name(self) -> str:
        return self.order.customer_name

    @property
    def consultant(self) -> str:
        return self.order.consultant

    @property
    def order_value(self) -> Decimal:
        return self.order.order_value


@dataclass(frozen=True)
class Salesperson:
    """Salesperson (consultant) domain entity."""

    id: str
    name: str
    business_unit: str
    sales_goal: Decimal
    level: str
    hire_date: date


@dataclass(frozen=True)
class UserProfile:
    """Access profile; the role decides what the user can see."""

    id: str
    name: str
    email: str
    role: UserRole


@dataclass(frozen=True)
class Commission:
    """Commission owed to the consultant of an order."""

    id: str
    order_id: str
    commission_rate: Decimal
    status: CommissionStatus
    payment_date: Optional[date]


@dataclass(frozen=True)
class CalculatedCommission:
    """Commission joined with its order's denormalized fields."""

    commission: Commission
    customer_name: str
    consultant: str
    order_value: Decimal
    commission_value: Decimal

    @property
    def id(self) -> str:
        return self.commission.id

    @property
    def order_id(self) -> str:
        return self.commission.order_id

    @property
    def status(self) -> CommissionStatus:
        return self.commission.status


@dataclass(frozen=True)
class GoalAttainment:
    """Monthly sales of one salesperson against their goal."""

    name: str
    monthly_sales: Decimal
    sales_goal: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class AppConfiguration:
    """Snapshot of the five lookup lists, keyed by ConfigList."""

    lists: Mapping[ConfigList, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "lists", MappingProxyType(dict(self.lists)))

    def items(self, config_list: ConfigList) -> tuple[str, ...]:
        return self.lists.get(config_list, ())


@dataclass(frozen=True)
class DashboardSummary:
    """Headline numbers and breakdowns shown on the dashboard."""

    received_this_month: Decimal
    total_balance: Decimal
    total_orders: int
    sales_by_consultant: tuple[tuple[str, Decimal], ...]
    orders_by_status: tuple[tuple[PaymentStatus, int], ...]
