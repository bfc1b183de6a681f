"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class PermissionDeniedError(DomainError):
    """The acting profile's role does not allow the operation."""


def record_not_found(kind: str, record_id: str) -> str:
    """Return message for a missing record of the given kind."""
    return f"{kind} {record_id} not found"


def order_already_commissioned(order_id: str) -> str:
    """Return message when an order already has a commission."""
    return f"Order {order_id} already has a commission"


def duplicate_config_item(list_label: str, value: str) -> str:
    """Return message for a duplicate lookup list item."""
    return f"'{value}' already exists in {list_label}"


def protected_order_status(value: str) -> str:
    """Return message when a canonical order status would be changed."""
    return f"Order status '{value}' is built in and cannot be renamed or deleted"


def active_profile_delete_blocked(profile_id: str) -> str:
    """Return message when the active profile would delete itself."""
    return f"Cannot delete profile {profile_id}: it is the profile currently in use"


def view_not_allowed(role: str, view: str) -> str:
    """Return message when a role cannot open a view."""
    return f"Role '{role}' cannot access '{view}'"


def action_not_allowed(role: str, action: str) -> str:
    """Return message when a role cannot change a kind of record."""
    return f"Role '{role}' cannot {action}"
