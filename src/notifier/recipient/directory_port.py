"""Directory ports — abstract interfaces for user and resource lookups."""

from abc import ABC, abstractmethod

from notifier.recipient.recipient import BatchResolution, Recipient, ResourceInfo


class UserDirectory(ABC):
    """Source of notification-eligible users and their channel preferences."""

    @abstractmethod
    def get_user(self, user_id: str) -> Recipient | None: ...

    @abstractmethod
    def get_users_batch(self, user_ids: list[str]) -> BatchResolution:
        """Look up many users at once.

        Returns:
            BatchResolution with found Recipients and the ids that were missing
        """
        ...

    @abstractmethod
    def update_preferences(self, user_id: str, **flags) -> Recipient | None:
        """Apply channel preference flags and return the updated user."""
        ...


class ResourceDirectory(ABC):
    """Source of resource snapshots used for template variables."""

    @abstractmethod
    def get_resource(self, resource_id: str) -> ResourceInfo | None: ...

    @abstractmethod
    def get_resources_batch(self, resource_ids: list[str]) -> BatchResolution: ...

    @abstractmethod
    def find_equivalents(self, resource_id: str, criteria: dict) -> list[ResourceInfo]:
        """Resources that could replace ``resource_id``.

        Criteria keys: capacity_tolerance_percent, required_features,
        preferred_features, exclude_resource_ids, limit.
        """
        ...
