"""RecipientResolver — hydrates event identifiers into full records.

Directory failures never abort a dispatch: an error from the collaborator
is logged and the affected identifiers are reported as not found.
"""

import structlog

from notifier.recipient.directory_port import ResourceDirectory, UserDirectory
from notifier.recipient.recipient import BatchResolution, Recipient, ResourceInfo

logger = structlog.get_logger(__name__)


def _unique(ids) -> list[str]:
    seen = set()
    ordered = []
    for value in ids:
        if value and value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


class RecipientResolver:
    def __init__(self, users: UserDirectory, resources: ResourceDirectory):
        self.users = users
        self.resources = resources

    # -------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------
    def resolve(self, user_id: str) -> Recipient | None:
        try:
            recipient = self.users.get_user(user_id)
        except Exception as exc:
            logger.warning("User directory lookup failed", user_id=user_id, error=str(exc))
            return None

        if recipient is None:
            logger.warning("Recipient not found", user_id=user_id)
        return recipient

    def resolve_batch(self, user_ids) -> BatchResolution:
        ids = _unique(user_ids)
        if not ids:
            return BatchResolution()

        try:
            result = self.users.get_users_batch(ids)
        except Exception as exc:
            logger.warning(
                "Batch user lookup failed, resolving individually",
                user_ids=ids,
                error=str(exc),
            )
            found, not_found = [], []
            for user_id in ids:
                recipient = self.resolve(user_id)
                if recipient is None:
                    not_found.append(user_id)
                else:
                    found.append(recipient)
            return BatchResolution(found=found, not_found=not_found)

        if result.not_found:
            logger.warning("Recipients not found", user_ids=list(result.not_found))
        return result

    def update_preferences(self, user_id: str, **flags) -> Recipient | None:
        return self.users.update_preferences(user_id, **flags)

    # -------------------------------------------------------------------
    # Resources
    # -------------------------------------------------------------------
    def resolve_resource(self, resource_id: str) -> ResourceInfo | None:
        try:
            resource = self.resources.get_resource(resource_id)
        except Exception as exc:
            logger.warning("Resource directory lookup failed", resource_id=resource_id, error=str(exc))
            return None

        if resource is None:
            logger.warning("Resource not found", resource_id=resource_id)
        return resource

    def resolve_resources(self, resource_ids) -> BatchResolution:
        ids = _unique(resource_ids)
        if not ids:
            return BatchResolution()
        try:
            return self.resources.get_resources_batch(ids)
        except Exception as exc:
            logger.warning("Batch resource lookup failed", resource_ids=ids, error=str(exc))
            return BatchResolution(found=[], not_found=ids)

    def find_equivalents(self, resource_id: str, criteria: dict | None = None) -> list[ResourceInfo]:
        try:
            return list(self.resources.find_equivalents(resource_id, criteria or {}))
        except Exception as exc:
            logger.warning("Equivalent resource search failed", resource_id=resource_id, error=str(exc))
            return []
