"""Salesperson domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from multiluz.database.base import Database
from multiluz.domain.derivation import derive_goal_attainment
from multiluz.domain.entities import GoalAttainment, Salesperson, UserProfile, UserRole
from multiluz.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    record_not_found,
)
from multiluz.domain.visibility import scope_orders

logger = logging.getLogger(__name__)


class SalespersonService:
    """Service for managing salespeople and their sales goals."""

    def __init__(self, db: Database):
        """Initialize salesperson service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_salesperson(
        self,
        name: str,
        business_unit: str,
        sales_goal: Decimal,
        level: str,
        hire_date: date,
    ) -> str:
        """Create a salesperson.

        Args:
            name: Salesperson name; orders refer to salespeople by this name
            business_unit: Business unit label
            sales_goal: Monthly sales target
            level: Seniority level label
            hire_date: Hire date

        Returns:
            Salesperson ID

        Raises:
            ValidationError: If the name is blank
            ConflictError: If another salesperson has the same name
        """
        self._validate_name(name, salesperson_id=None)
        salesperson_id = self.db.create_salesperson(
            name=name,
            business_unit=business_unit,
            sales_goal=sales_goal,
            level=level,
            hire_date=hire_date,
        )
        logger.info("Created salesperson %s (%s)", salesperson_id, name)
        return salesperson_id

    def get_salesperson(self, salesperson_id: str) -> Optional[Salesperson]:
        """Get salesperson by ID."""
        return self.db.get_salesperson(salesperson_id)

    def find_by_name(self, name: str) -> Optional[Salesperson]:
        """Get salesperson by exact name."""
        for person in self.db.list_salespeople():
            if person.name == name:
                return person
        return None

    def list_salespeople(self) -> list[Salesperson]:
        """List all salespeople."""
        return self.db.list_salespeople()

    def update_salesperson(
        self,
        salesperson_id: str,
        name: Optional[str] = None,
        business_unit: Optional[str] = None,
        sales_goal: Optional[Decimal] = None,
        level: Optional[str] = None,
        hire_date: Optional[date] = None,
    ) -> None:
        """Update a salesperson; fields left as None keep their value.

        Raises:
            NotFoundError: If the salesperson does not exist
            ValidationError: If the new name is blank
            ConflictError: If the new name belongs to another salesperson
        """
        person = self.db.get_salesperson(salesperson_id)
        if person is None:
            raise NotFoundError(record_not_found("Salesperson", salesperson_id))
        if name is not None:
            self._validate_name(name, salesperson_id=salesperson_id)

        self.db.update_salesperson(
            salesperson_id,
            name=name if name is not None else person.name,
            business_unit=business_unit if business_unit is not None else person.business_unit,
            sales_goal=sales_goal if sales_goal is not None else person.sales_goal,
            level=level if level is not None else person.level,
            hire_date=hire_date if hire_date is not None else person.hire_date,
        )
        logger.info("Updated salesperson %s", salesperson_id)

    def delete_salesperson(self, salesperson_id: str) -> None:
        """Delete a salesperson.

        Orders keep the consultant name they were created with.

        Raises:
            NotFoundError: If the salesperson does not exist
        """
        if self.db.get_salesperson(salesperson_id) is None:
            raise NotFoundError(record_not_found("Salesperson", salesperson_id))
        self.db.delete_salesperson(salesperson_id)
        logger.info("Deleted salesperson %s", salesperson_id)

    def goal_attainment(
        self, month: int, year: int, user: Optional[UserProfile] = None
    ) -> list[GoalAttainment]:
        """Monthly sales against goal, best first.

        Args:
            month: Reference month (1-12)
            year: Reference year
            user: Acting profile; a salesperson only gets their own row

        Returns:
            One GoalAttainment per visible salesperson
        """
        orders = self.db.list_orders()
        people = self.db.list_salespeople()
        if user is not None:
            orders = scope_orders(orders, user)
            if user.role == UserRole.SALESPERSON:
                people = [p for p in people if p.name == user.name]
        return derive_goal_attainment(orders, people, month, year)

    def _validate_name(self, name: str, salesperson_id: Optional[str]) -> None:
        if not name.strip():
            raise ValidationError("Salesperson name is required")
        for person in self.db.list_salespeople():
            if person.id != salesperson_id and person.name == name:
                raise ConflictError(f"Salesperson with name '{name}' already exists")
