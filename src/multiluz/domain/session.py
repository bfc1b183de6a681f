"""Acting identity and current view of the application."""

import logging
from dataclasses import dataclass

from multiluz.domain.entities import Action, UserProfile, UserRole, View
from multiluz.domain.errors import PermissionDeniedError, action_not_allowed, view_not_allowed

logger = logging.getLogger(__name__)

ROLE_VIEWS: dict[UserRole, frozenset[View]] = {
    UserRole.ADMIN: frozenset(View),
    UserRole.MANAGER: frozenset(View) - {View.PROFILES, View.SETTINGS},
    UserRole.SALESPERSON: frozenset({View.DASHBOARD, View.ORDERS, View.PAYMENTS, View.DETAIL}),
}

# Managers only read orders and payments
ROLE_ACTIONS: dict[UserRole, frozenset[Action]] = {
    UserRole.ADMIN: frozenset(Action),
    UserRole.MANAGER: frozenset(),
    UserRole.SALESPERSON: frozenset({Action.CREATE_ORDER, Action.RECORD_PAYMENT}),
}


def allowed_views(role: UserRole) -> frozenset[View]:
    """Views a role may open."""
    return ROLE_VIEWS[role]


def allowed_actions(role: UserRole) -> frozenset[Action]:
    """Record changes a role may make."""
    return ROLE_ACTIONS[role]


@dataclass
class AppSession:
    """Who is acting and which view they are on.

    Changing the acting identity always returns to the dashboard, so a new
    user never lands on a view left open by the previous one.
    """

    current_user: UserProfile
    current_view: View = View.DASHBOARD

    def switch_user(self, profile: UserProfile) -> None:
        logger.debug("Switching acting profile to %s", profile.id)
        self.current_user = profile
        self.current_view = View.DASHBOARD

    def can_access(self, view: View) -> bool:
        return view in allowed_views(self.current_user.role)

    def can_perform(self, action: Action) -> bool:
        return action in allowed_actions(self.current_user.role)

    def navigate(self, view: View) -> None:
        """Open a view.

        Raises:
            PermissionDeniedError: If the current role cannot open the view
        """
        if not self.can_access(view):
            raise PermissionDeniedError(
                view_not_allowed(self.current_user.role.value, view.value)
            )
        self.current_view = view

    def authorize(self, action: Action) -> None:
        """Check that the current role may make a change.

        Raises:
            PermissionDeniedError: If the current role cannot perform the action
        """
        if not self.can_perform(action):
            logger.warning("%s tried to %s", self.current_user.id or "anonymous", action.value)
            raise PermissionDeniedError(
                action_not_allowed(self.current_user.role.value, action.value)
            )
