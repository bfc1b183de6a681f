"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from multiluz.domain.entities import (
    Commission,
    ConfigList,
    Order,
    Payment,
    Salesperson,
    UserProfile,
)


class Database(ABC):
    """Abstract record store for multiluz.

    Every mutation replaces or removes a single record. Update methods take
    the full set of new field values; records are identified by their
    string ids (e.g. 'ORD-001').
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Order operations
    @abstractmethod
    def create_order(self, **fields: Any) -> str:
        """Create an order. Returns order ID."""
        pass

    @abstractmethod
    def get_order(self, order_id: str) -> Optional[Order]:
        """Get order by ID."""
        pass

    @abstractmethod
    def list_orders(self) -> list[Order]:
        """List all orders in creation order."""
        pass

    @abstractmethod
    def update_order(self, order_id: str, **fields: Any) -> None:
        """Replace order fields."""
        pass

    # Payment operations
    @abstractmethod
    def create_payment(self, **fields: Any) -> str:
        """Create a payment. Returns payment ID."""
        pass

    @abstractmethod
    def get_payment(self, payment_id: str) -> Optional[Payment]:
        """Get payment by ID."""
        pass

    @abstractmethod
    def list_payments(self, order_id: Optional[str] = None) -> list[Payment]:
        """List payments in creation order, optionally for one order."""
        pass

    @abstractmethod
    def update_payment(self, payment_id: str, **fields: Any) -> None:
        """Replace payment fields."""
        pass

    @abstractmethod
    def delete_payment(self, payment_id: str) -> None:
        """Delete a payment."""
        pass

    # Salesperson operations
    @abstractmethod
    def create_salesperson(self, **fields: Any) -> str:
        """Create a salesperson. Returns salesperson ID."""
        pass

    @abstractmethod
    def get_salesperson(self, salesperson_id: str) -> Optional[Salesperson]:
        """Get salesperson by ID."""
        pass

    @abstractmethod
    def list_salespeople(self) -> list[Salesperson]:
        """List all salespeople in creation order."""
        pass

    @abstractmethod
    def update_salesperson(self, salesperson_id: str, **fields: Any) -> None:
        """Replace salesperson fields."""
        pass

    @abstractmethod
    def delete_salesperson(self, salesperson_id: str) -> None:
        """Delete a salesperson."""
        pass

    # User profile operations
    @abstractmethod
    def create_user_profile(self, **fields: Any) -> str:
        """Create a user profile. Returns profile ID."""
        pass

    @abstractmethod
    def get_user_profile(self, profile_id: str) -> Optional[UserProfile]:
        """Get user profile by ID."""
        pass

    @abstractmethod
    def list_user_profiles(self) -> list[UserProfile]:
        """List all user profiles in creation order."""
        pass

    @abstractmethod
    def update_user_profile(self, profile_id: str, **fields: Any) -> None:
        """Replace user profile fields."""
        pass

    @abstractmethod
    def delete_user_profile(self, profile_id: str) -> None:
        """Delete a user profile."""
        pass

    # Commission operations
    @abstractmethod
    def create_commission(self, **fields: Any) -> str:
        """Create a commission. Returns commission ID."""
        pass

    @abstractmethod
    def get_commission(self, commission_id: str) -> Optional[Commission]:
        """Get commission by ID."""
        pass

    @abstractmethod
    def list_commissions(self) -> list[Commission]:
        """List all commissions in creation order."""
        pass

    @abstractmethod
    def update_commission(self, commission_id: str, **fields: Any) -> None:
        """Replace commission fields."""
        pass

    @abstractmethod
    def delete_commission(self, commission_id: str) -> None:
        """Delete a commission."""
        pass

    # Configuration list operations
    @abstractmethod
    def list_config_items(self, config_list: ConfigList) -> list[str]:
        """List items of a lookup list in their display order."""
        pass

    @abstractmethod
    def add_config_item(self, config_list: ConfigList, value: str) -> None:
        """Append an item to a lookup list."""
        pass

    @abstractmethod
    def rename_config_item(
        self,
        config_list: ConfigList,
        old_value: str,
        new_value: str,
        cascade: Optional[tuple[str, str]] = None,
    ) -> int:
        """Rename a lookup list item in place, keeping its position.

        Args:
            config_list: List holding the item
            old_value: Current value
            new_value: Replacement value
            cascade: Optional (entity, field) whose records holding old_value
                are updated in the same transaction

        Returns:
            Number of cascaded records changed
        """
        pass

    @abstractmethod
    def delete_config_item(self, config_list: ConfigList, value: str) -> None:
        """Remove an item from a lookup list."""
        pass

    @abstractmethod
    def replace_field_value(self, entity: str, field: str, old_value: str, new_value: str) -> int:
        """Replace a text value in one column of every matching record.

        Args:
            entity: 'order' or 'salesperson'
            field: Domain field name (e.g. 'business_unit')

        Returns:
            Number of records changed
        """
        pass
