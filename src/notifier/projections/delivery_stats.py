"""DeliveryStats — daily sent/failed counters by event type and channel."""

import json
from collections import defaultdict

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Integer, String
from protean.utils.globals import current_domain

from notifier.domain import notifier
from notifier.notification.events import NotificationProcessed
from notifier.notification.result import DeliveryStatus, NotificationResult

_SUMMARY_SCAN_LIMIT = 10_000


@notifier.projection
class DeliveryStats:
    stat_key: String(identifier=True, required=True)  # "YYYY-MM-DD:eventType:channel"
    date: String(required=True, max_length=10)
    event_type: String(required=True)
    channel: String(required=True)
    sent: Integer(default=0)
    failed: Integer(default=0)
    updated_at: DateTime()


@notifier.projector(projector_for=DeliveryStats, aggregates=[NotificationResult])
class DeliveryStatsProjector:
    @on(NotificationProcessed)
    def on_notification_processed(self, event):
        channel_results = json.loads(event.channel_results) if event.channel_results else []
        if not channel_results:
            return

        date_str = event.processed_at.strftime("%Y-%m-%d")
        counts = defaultdict(lambda: [0, 0])
        for entry in channel_results:
            tally = counts[entry["channel"]]
            if entry["status"] == DeliveryStatus.SUCCESS.value:
                tally[0] += 1
            else:
                tally[1] += 1

        repo = current_domain.repository_for(DeliveryStats)
        for channel, (sent, failed) in counts.items():
            stat_key = f"{date_str}:{event.event_type}:{channel}"
            try:
                stat = repo.get(stat_key)
                stat.sent = stat.sent + sent
                stat.failed = stat.failed + failed
                stat.updated_at = event.processed_at
            except ObjectNotFoundError:
                stat = DeliveryStats(
                    stat_key=stat_key,
                    date=date_str,
                    event_type=event.event_type,
                    channel=channel,
                    sent=sent,
                    failed=failed,
                    updated_at=event.processed_at,
                )
            repo.add(stat)


def delivery_summary() -> dict:
    """Totals, delivery rate and per-channel / per-event-type breakdowns."""
    stats = current_domain.repository_for(DeliveryStats)._dao.query.limit(_SUMMARY_SCAN_LIMIT).all().items

    channel_stats: dict[str, dict] = defaultdict(lambda: {"sent": 0, "failed": 0})
    event_type_stats: dict[str, dict] = defaultdict(lambda: {"sent": 0, "failed": 0})
    for stat in stats:
        for bucket in (channel_stats[stat.channel], event_type_stats[stat.event_type]):
            bucket["sent"] += stat.sent
            bucket["failed"] += stat.failed

    total_sent = sum(s.sent for s in stats)
    total_failed = sum(s.failed for s in stats)
    attempts = total_sent + total_failed

    return {
        "total_sent": total_sent,
        "total_failed": total_failed,
        "delivery_rate": round(total_sent / attempts * 100, 2) if attempts else 0.0,
        "channel_stats": dict(channel_stats),
        "event_type_stats": dict(event_type_stats),
    }
