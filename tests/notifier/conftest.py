import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture

import notifier.routing  # noqa: F401  (load the package before init() traverses its submodules)
from notifier.catalog import ChannelType, NotificationPriority
from notifier.notification.payload import ChannelConfig, NotificationPayload
from notifier.recipient import get_resource_directory, get_user_directory
from notifier.recipient.recipient import ChannelPreferences, Recipient, ResourceInfo


@pytest.fixture(scope="session")
def notifier_bed():
    from notifier.domain import notifier

    bed = DomainFixture(notifier)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(notifier_bed):
    with notifier_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


def _make_recipient(user_id="user-1", **overrides) -> Recipient:
    defaults = {
        "email": f"{user_id}@example.com",
        "phone": None,
        "push_tokens": (),
        "preferred_language": "es",
        "timezone": "UTC",
        "preferences": ChannelPreferences(email=True, sms=False, push=False, in_app=False, whatsapp=False),
        "first_name": "Ana",
        "last_name": "García",
    }
    defaults.update(overrides)
    return Recipient(user_id=user_id, **defaults)


def _make_payload(recipients, channels, /, event_type="WaitingListSlotAvailable", **overrides) -> NotificationPayload:
    defaults = {
        "event_type": event_type,
        "event_id": "evt-1",
        "aggregate_id": "agg-1",
        "priority": NotificationPriority.HIGH,
        "recipients": tuple(recipients),
        "template_variables": {"resourceName": "Sala A", "slotDate": "2026-03-01", "slotTime": "10:00"},
        "channels": tuple(ChannelConfig(ChannelType(c), NotificationPriority.HIGH) for c in channels),
    }
    defaults.update(overrides)
    return NotificationPayload(**defaults)


@pytest.fixture
def make_recipient():
    return _make_recipient


@pytest.fixture
def make_payload():
    return _make_payload


@pytest.fixture
def user_directory():
    return get_user_directory()


@pytest.fixture
def resource_directory():
    return get_resource_directory()


@pytest.fixture
def lab_resource(resource_directory):
    return resource_directory.add(ResourceInfo(id="res-lab", name="Laboratorio 1", type="LAB", capacity=30))
