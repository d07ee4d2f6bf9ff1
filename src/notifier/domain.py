"""Notifier bounded context — booking notification dispatch.

Turns domain events from the availability and resources services into
rendered messages delivered over email, SMS, push, in-app and WhatsApp,
respecting recipient channel preferences, template availability and
delivery deadlines. Every dispatch produces an auditable NotificationResult.
"""

import structlog
from protean.domain import Domain

notifier = Domain(name="notifier")

logger = structlog.get_logger(__name__)
