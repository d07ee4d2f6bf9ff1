"""ChannelTransport — hands a rendered message to the right channel adapter."""

from notifier.catalog import ChannelType
from notifier.channel import get_channel
from notifier.recipient.recipient import Recipient
from notifier.templates.template import RenderedMessage


class AdapterTransport:
    """Routes each message to the registered adapter for its channel."""

    def __init__(self, channel_lookup=get_channel):
        self._channel_lookup = channel_lookup

    def send(self, channel: ChannelType, recipient: Recipient, message: RenderedMessage, data: dict | None = None) -> dict:
        try:
            channel = ChannelType(channel)
        except ValueError:
            return {"message_id": None, "status": "failed", "error": f"Unknown channel: {channel}"}

        adapter = self._channel_lookup(channel)

        if channel == ChannelType.EMAIL:
            return adapter.send(
                to=recipient.email,
                subject=message.subject or "",
                body=message.body,
                html_body=message.html_body,
            )
        elif channel == ChannelType.SMS:
            return adapter.send(to=recipient.phone, body=message.body)
        elif channel == ChannelType.PUSH:
            return adapter.send(
                device_tokens=list(recipient.push_tokens),
                title=message.title or message.subject or "",
                body=message.body,
                data=data,
            )
        elif channel == ChannelType.IN_APP:
            return adapter.send(
                user_id=recipient.user_id,
                title=message.title or message.subject or "",
                body=message.body,
                data=data,
            )
        else:
            return adapter.send(to=recipient.phone, body=message.body)
