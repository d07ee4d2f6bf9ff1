"""Tests for the inbound booking event envelope."""

import re

from shared.events.booking import BookingEvent, new_event_id


def test_event_id_format():
    event_id = new_event_id("WaitingListSlotAvailable")
    assert re.fullmatch(r"waiting-list-slot-available-\d{13}-[0-9a-f]{9}", event_id)


def test_event_ids_are_unique():
    assert new_event_id("ResourceCreated") != new_event_id("ResourceCreated")


def test_build_stamps_envelope():
    event = BookingEvent.build(
        "UserJoinedWaitingList",
        aggregate_id="wl-1",
        aggregate_type="WaitingList",
        event_data={"userId": "u-1", "position": 3},
        user_id="u-1",
    )
    assert event.event_type == "UserJoinedWaitingList"
    assert event.event_id.startswith("user-joined-waiting-list-")
    assert event.occurred_at is not None
    assert event.event_version == 1
    assert event.decoded_data() == {"userId": "u-1", "position": 3}


def test_decoded_data_tolerates_bad_json():
    event = BookingEvent.build("ResourceCreated", aggregate_id="r-1", aggregate_type="Resource")
    assert event.decoded_data() == {}

    broken = BookingEvent(
        event_type="ResourceCreated",
        event_id="evt-1",
        aggregate_id="r-1",
        aggregate_type="Resource",
        occurred_at=event.occurred_at,
        event_data="[1, 2]",
    )
    assert broken.decoded_data() == {}
