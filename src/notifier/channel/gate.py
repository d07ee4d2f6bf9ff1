"""ChannelGate — may this channel be used for this recipient?

A channel is eligible only when the recipient opted in AND the contact
artifact the channel needs (address, number, device token) is present.
"""

from notifier.catalog import ChannelType
from notifier.recipient.recipient import Recipient

_RULES = {
    ChannelType.EMAIL: lambda r: r.preferences.email and bool(r.email),
    ChannelType.SMS: lambda r: r.preferences.sms and bool(r.phone),
    ChannelType.PUSH: lambda r: r.preferences.push and bool(r.push_tokens),
    ChannelType.IN_APP: lambda r: r.preferences.in_app,
    ChannelType.WHATSAPP: lambda r: r.preferences.whatsapp and bool(r.phone),
}


def eligible(recipient: Recipient, channel) -> bool:
    try:
        rule = _RULES.get(ChannelType(channel))
    except ValueError:
        return False
    if rule is None:
        return False
    return bool(rule(recipient))
