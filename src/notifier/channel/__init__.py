"""Channel adapter registry — pluggable notification delivery channels.

Provides singleton access to channel adapters. Fake adapters are used
by default; provider-backed adapters implement the same ports.
"""

import threading

from notifier.catalog import ChannelType

_channel_instances: dict[ChannelType, object] = {}
_lock = threading.Lock()


def get_channel(channel_type):
    """Return the configured adapter for a channel (singleton per channel).

    Args:
        channel_type: a ChannelType or its value ("Email", "SMS", "Push", "InApp", "WhatsApp")
    """
    channel_type = ChannelType(channel_type)
    with _lock:
        if channel_type not in _channel_instances:
            _channel_instances[channel_type] = _build_adapter(channel_type)
    return _channel_instances[channel_type]


def _build_adapter(channel_type: ChannelType):
    from notifier.channel import fakes

    adapters = {
        ChannelType.EMAIL: fakes.FakeEmailAdapter,
        ChannelType.SMS: fakes.FakeSMSAdapter,
        ChannelType.PUSH: fakes.FakePushAdapter,
        ChannelType.IN_APP: fakes.FakeInAppAdapter,
        ChannelType.WHATSAPP: fakes.FakeWhatsAppAdapter,
    }
    return adapters[channel_type]()


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
