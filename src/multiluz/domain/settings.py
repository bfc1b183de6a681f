"""Lookup list (settings) domain service."""

import logging

from multiluz.database.base import Database
from multiluz.domain.entities import AppConfiguration, ConfigList, OrderStatus
from multiluz.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_config_item,
    protected_order_status,
)

logger = logging.getLogger(__name__)

LIST_LABELS = {
    ConfigList.BUSINESS_UNITS: "business units",
    ConfigList.PAYMENT_METHODS: "payment methods",
    ConfigList.ORDER_ORIGINS: "order origins",
    ConfigList.SALESPERSON_LEVELS: "salesperson levels",
    ConfigList.ORDER_STATUSES: "order statuses",
}

# Records that store a list's values; a rename rewrites them too
RENAME_CASCADES = {
    ConfigList.BUSINESS_UNITS: ("salesperson", "business_unit"),
    ConfigList.SALESPERSON_LEVELS: ("salesperson", "level"),
    ConfigList.PAYMENT_METHODS: ("order", "payment_method"),
    ConfigList.ORDER_ORIGINS: ("order", "origin"),
    ConfigList.ORDER_STATUSES: ("order", "order_status"),
}

PROTECTED_ORDER_STATUSES = frozenset(status.value for status in OrderStatus)


class SettingsService:
    """Service for the configurable lookup lists."""

    def __init__(self, db: Database):
        """Initialize settings service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_configuration(self) -> AppConfiguration:
        """Return a snapshot of all lookup lists."""
        return AppConfiguration(
            lists={key: tuple(self.db.list_config_items(key)) for key in ConfigList}
        )

    def list_items(self, config_list: ConfigList) -> list[str]:
        """List the items of one lookup list."""
        return self.db.list_config_items(config_list)

    def add_item(self, config_list: ConfigList, value: str) -> str:
        """Append an item to a lookup list.

        Returns:
            The stored (stripped) value

        Raises:
            ValidationError: If the value is blank
            ConflictError: If the value is already in the list
        """
        value = self._clean(value)
        if value in self.db.list_config_items(config_list):
            raise ConflictError(duplicate_config_item(LIST_LABELS[config_list], value))
        self.db.add_config_item(config_list, value)
        logger.info("Added '%s' to %s", value, config_list.value)
        return value

    def rename_item(self, config_list: ConfigList, old_value: str, new_value: str) -> int:
        """Rename an item in place and update the records that use it.

        Returns:
            Number of referencing records updated

        Raises:
            ValidationError: If the new value is blank
            NotFoundError: If the old value is not in the list
            ConflictError: If the new value already exists or the item is a
                built-in order status
        """
        new_value = self._clean(new_value)
        items = self.db.list_config_items(config_list)
        if old_value not in items:
            raise NotFoundError(f"'{old_value}' not found in {LIST_LABELS[config_list]}")
        if old_value == new_value:
            return 0
        if new_value in items:
            raise ConflictError(duplicate_config_item(LIST_LABELS[config_list], new_value))
        self._check_not_protected(config_list, old_value)

        entity, field = RENAME_CASCADES[config_list]
        changed = self.db.rename_config_item(
            config_list, old_value, new_value, cascade=(entity, field)
        )
        logger.info("Renamed '%s' to '%s' in %s", old_value, new_value, config_list.value)
        logger.debug("Rename cascaded to %d %s record(s)", changed, entity)
        return changed

    def delete_item(self, config_list: ConfigList, value: str) -> None:
        """Remove an item from a lookup list.

        Records that already use the value keep it.

        Raises:
            NotFoundError: If the value is not in the list
            ConflictError: If the item is a built-in order status
        """
        if value not in self.db.list_config_items(config_list):
            raise NotFoundError(f"'{value}' not found in {LIST_LABELS[config_list]}")
        self._check_not_protected(config_list, value)
        self.db.delete_config_item(config_list, value)
        logger.info("Deleted '%s' from %s", value, config_list.value)

    @staticmethod
    def _clean(value: str) -> str:
        value = value.strip()
        if not value:
            raise ValidationError("Value cannot be empty")
        return value

    @staticmethod
    def _check_not_protected(config_list: ConfigList, value: str) -> None:
        if config_list == ConfigList.ORDER_STATUSES and value in PROTECTED_ORDER_STATUSES:
            raise ConflictError(protected_order_status(value))
