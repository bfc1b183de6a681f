"""User profile domain service."""

import logging
from typing import Optional

from multiluz.database.base import Database
from multiluz.domain.entities import UserProfile, UserRole
from multiluz.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    active_profile_delete_blocked,
    record_not_found,
)

logger = logging.getLogger(__name__)


class UserProfileService:
    """Service for managing user access profiles."""

    def __init__(self, db: Database):
        """Initialize user profile service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_profile(self, name: str, email: str, role: UserRole) -> str:
        """Create a user profile.

        Returns:
            Profile ID

        Raises:
            ValidationError: If the name is blank or the email is malformed
        """
        self._validate(name, email)
        profile_id = self.db.create_user_profile(name=name, email=email, role=role)
        logger.info("Created profile %s (%s, %s)", profile_id, name, role.value)
        return profile_id

    def get_profile(self, profile_id: str) -> Optional[UserProfile]:
        """Get profile by ID."""
        return self.db.get_user_profile(profile_id)

    def list_profiles(self) -> list[UserProfile]:
        """List all profiles."""
        return self.db.list_user_profiles()

    def default_profile(self) -> Optional[UserProfile]:
        """Return the first admin profile, or None when there is none."""
        for profile in self.db.list_user_profiles():
            if profile.role == UserRole.ADMIN:
                return profile
        return None

    def update_profile(
        self,
        profile_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> None:
        """Update a profile; fields left as None keep their value.

        Raises:
            NotFoundError: If the profile does not exist
            ValidationError: If the new name or email is invalid
        """
        profile = self.db.get_user_profile(profile_id)
        if profile is None:
            raise NotFoundError(record_not_found("Profile", profile_id))

        new_name = name if name is not None else profile.name
        new_email = email if email is not None else profile.email
        self._validate(new_name, new_email)
        self.db.update_user_profile(
            profile_id,
            name=new_name,
            email=new_email,
            role=role if role is not None else profile.role,
        )
        logger.info("Updated profile %s", profile_id)

    def delete_profile(self, profile_id: str, active_profile_id: Optional[str]) -> None:
        """Delete a profile.

        Args:
            profile_id: Profile to delete
            active_profile_id: Profile of the acting user

        Raises:
            NotFoundError: If the profile does not exist
            ConflictError: If the acting user tries to delete their own profile
        """
        if self.db.get_user_profile(profile_id) is None:
            raise NotFoundError(record_not_found("Profile", profile_id))
        if profile_id == active_profile_id:
            logger.warning("Refused to delete active profile %s", profile_id)
            raise ConflictError(active_profile_delete_blocked(profile_id))
        self.db.delete_user_profile(profile_id)
        logger.info("Deleted profile %s", profile_id)

    @staticmethod
    def _validate(name: str, email: str) -> None:
        if not name.strip():
            raise ValidationError("Profile name is required")
        local, _, domain = email.strip().partition("@")
        if not local or "." not in domain:
            raise ValidationError(f"Invalid email address '{email}'")
