"""In-memory directories — stand-ins for the user and resource services."""

from dataclasses import replace

from notifier.recipient.directory_port import ResourceDirectory, UserDirectory
from notifier.recipient.recipient import BatchResolution, Recipient, ResourceInfo


class InMemoryUserDirectory(UserDirectory):
    """User directory backed by a dict, with switchable failure for tests."""

    def __init__(self):
        self.users: dict[str, Recipient] = {}
        self.should_fail = False
        self.failure_reason = "User directory unavailable"
        self.batch_calls = 0

    def configure(self, should_fail: bool = False, failure_reason: str = "User directory unavailable"):
        self.should_fail = should_fail
        self.failure_reason = failure_reason

    def add(self, recipient: Recipient) -> Recipient:
        self.users[recipient.user_id] = recipient
        return recipient

    def _check(self):
        if self.should_fail:
            raise ConnectionError(self.failure_reason)

    def get_user(self, user_id: str) -> Recipient | None:
        self._check()
        return self.users.get(user_id)

    def get_users_batch(self, user_ids: list[str]) -> BatchResolution:
        self.batch_calls += 1
        self._check()
        found = [self.users[uid] for uid in user_ids if uid in self.users]
        not_found = [uid for uid in user_ids if uid not in self.users]
        return BatchResolution(found=found, not_found=not_found)

    def update_preferences(self, user_id: str, **flags) -> Recipient | None:
        self._check()
        user = self.users.get(user_id)
        if user is None:
            return None
        updated = replace(user, preferences=user.preferences.updated(**flags))
        self.users[user_id] = updated
        return updated

    def reset(self):
        self.users.clear()
        self.should_fail = False
        self.failure_reason = "User directory unavailable"
        self.batch_calls = 0


class InMemoryResourceDirectory(ResourceDirectory):
    """Resource directory backed by a dict."""

    def __init__(self):
        self.resources: dict[str, ResourceInfo] = {}
        self.should_fail = False

    def configure(self, should_fail: bool = False):
        self.should_fail = should_fail

    def add(self, resource: ResourceInfo) -> ResourceInfo:
        self.resources[resource.id] = resource
        return resource

    def _check(self):
        if self.should_fail:
            raise ConnectionError("Resource directory unavailable")

    def get_resource(self, resource_id: str) -> ResourceInfo | None:
        self._check()
        return self.resources.get(resource_id)

    def get_resources_batch(self, resource_ids: list[str]) -> BatchResolution:
        self._check()
        found = [self.resources[rid] for rid in resource_ids if rid in self.resources]
        not_found = [rid for rid in resource_ids if rid not in self.resources]
        return BatchResolution(found=found, not_found=not_found)

    def find_equivalents(self, resource_id: str, criteria: dict) -> list[ResourceInfo]:
        self._check()
        original = self.resources.get(resource_id)
        if original is None:
            return []

        tolerance = criteria.get("capacity_tolerance_percent", 20)
        required = set(criteria.get("required_features") or ())
        preferred = set(criteria.get("preferred_features") or ())
        excluded = set(criteria.get("exclude_resource_ids") or ()) | {resource_id}
        limit = criteria.get("limit", 5)
        base_capacity = original.capacity or 0
        min_capacity = base_capacity * (1 - tolerance / 100)

        candidates = [
            r
            for r in self.resources.values()
            if r.id not in excluded
            and r.type == original.type
            and (r.capacity or 0) >= min_capacity
            and required.issubset(r.features)
        ]
        candidates.sort(
            key=lambda r: (-len(preferred.intersection(r.features)), abs((r.capacity or 0) - base_capacity))
        )
        return candidates[:limit]

    def reset(self):
        self.resources.clear()
        self.should_fail = False
