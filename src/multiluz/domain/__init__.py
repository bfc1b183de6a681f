"""Domain layer for multiluz application."""

_SERVICES = {
    "OrderService": "multiluz.domain.order",
    "PaymentService": "multiluz.domain.payment",
    "CommissionService": "multiluz.domain.commission",
    "SalespersonService": "multiluz.domain.salesperson",
    "UserProfileService": "multiluz.domain.profile",
    "SettingsService": "multiluz.domain.settings",
    "DashboardService": "multiluz.domain.dashboard",
    "AppSession": "multiluz.domain.session",
}

__all__ = list(_SERVICES)


# Services import the database layer, which imports the entities from this
# package, so they are loaded on first access
def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
