"""Tests for the recipient resolver and the in-memory directories."""

from notifier.recipient.fake_directory import InMemoryResourceDirectory, InMemoryUserDirectory
from notifier.recipient.recipient import ChannelPreferences, Recipient, ResourceInfo
from notifier.recipient.resolver import RecipientResolver


class TestResolveUsers:
    def setup_method(self):
        self.users = InMemoryUserDirectory()
        self.resources = InMemoryResourceDirectory()
        self.resolver = RecipientResolver(self.users, self.resources)
        self.users.add(Recipient(user_id="u-1", email="a@example.com"))
        self.users.add(Recipient(user_id="u-2", email="b@example.com"))

    def test_resolve_found(self):
        assert self.resolver.resolve("u-1").email == "a@example.com"

    def test_resolve_missing_is_none(self):
        assert self.resolver.resolve("ghost") is None

    def test_directory_error_is_none(self):
        self.users.configure(should_fail=True)
        assert self.resolver.resolve("u-1") is None

    def test_batch_reports_partial_misses(self):
        resolution = self.resolver.resolve_batch(["u-1", "ghost", "u-2"])
        assert [r.user_id for r in resolution.found] == ["u-1", "u-2"]
        assert resolution.not_found == ["ghost"]

    def test_batch_deduplicates(self):
        self.resolver.resolve_batch(["u-1", "u-1", "", "u-2"])
        resolution = self.resolver.resolve_batch(["u-1", "u-1"])
        assert [r.user_id for r in resolution.found] == ["u-1"]

    def test_batch_empty(self):
        resolution = self.resolver.resolve_batch([])
        assert resolution.found == []
        assert resolution.not_found == []
        assert self.users.batch_calls == 0

    def test_batch_error_degrades_to_not_found(self):
        self.users.configure(should_fail=True)
        resolution = self.resolver.resolve_batch(["u-1", "u-2"])
        assert resolution.found == []
        assert resolution.not_found == ["u-1", "u-2"]

    def test_update_preferences(self):
        updated = self.resolver.update_preferences("u-1", sms=True, push=None)
        assert updated.preferences.sms is True
        assert updated.preferences.email is True
        assert self.users.get_user("u-1").preferences.sms is True

    def test_update_preferences_unknown_user(self):
        assert self.resolver.update_preferences("ghost", sms=True) is None


class TestResolveResources:
    def setup_method(self):
        self.resources = InMemoryResourceDirectory()
        self.resolver = RecipientResolver(InMemoryUserDirectory(), self.resources)
        self.resources.add(ResourceInfo(id="r-1", name="Aula 101", type="CLASSROOM", capacity=40))
        self.resources.add(ResourceInfo(id="r-2", name="Aula 102", type="CLASSROOM", capacity=35, features=("projector",)))
        self.resources.add(ResourceInfo(id="r-3", name="Aula 103", type="CLASSROOM", capacity=10))
        self.resources.add(ResourceInfo(id="r-4", name="Lab 1", type="LAB", capacity=40))
        self.resources.add(ResourceInfo(id="r-5", name="Auditorio", type="CLASSROOM", capacity=200))

    def test_resolve_resource(self):
        assert self.resolver.resolve_resource("r-1").name == "Aula 101"
        assert self.resolver.resolve_resource("ghost") is None

    def test_resource_directory_error(self):
        self.resources.configure(should_fail=True)
        assert self.resolver.resolve_resource("r-1") is None
        assert self.resolver.find_equivalents("r-1") == []
        assert self.resolver.resolve_resources(["r-1"]).not_found == ["r-1"]

    def test_batch_resources(self):
        resolution = self.resolver.resolve_resources(["r-1", "ghost"])
        assert [r.id for r in resolution.found] == ["r-1"]
        assert resolution.not_found == ["ghost"]

    def test_equivalents_match_type_and_capacity(self):
        equivalents = self.resolver.find_equivalents("r-1", {"capacity_tolerance_percent": 20})
        # Same type, capacity >= 32, closest first; the original is excluded
        assert [r.id for r in equivalents] == ["r-2", "r-5"]

    def test_equivalents_required_features(self):
        equivalents = self.resolver.find_equivalents("r-1", {"required_features": ["projector"]})
        assert [r.id for r in equivalents] == ["r-2"]

    def test_equivalents_exclusions_and_limit(self):
        equivalents = self.resolver.find_equivalents("r-1", {"exclude_resource_ids": ["r-2"], "limit": 1})
        assert [r.id for r in equivalents] == ["r-5"]

    def test_equivalents_of_unknown_resource(self):
        assert self.resolver.find_equivalents("ghost") == []


class TestRecipient:
    def test_display_name(self):
        assert Recipient(user_id="u-1", first_name="Ana", last_name="García").display_name == "Ana García"
        assert Recipient(user_id="u-1").display_name == "u-1"

    def test_preferences_updated_ignores_none(self):
        prefs = ChannelPreferences().updated(sms=True, email=None)
        assert prefs.sms is True
        assert prefs.email is True
