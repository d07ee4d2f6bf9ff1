"""Built-in templates loaded into a fresh registry."""

from notifier.catalog import ChannelType
from notifier.templates.template import Template

_SLOT_VARIABLES = frozenset(
    {"resourceName", "slotDate", "slotTime", "position", "waitTime", "confirmationTimeLimit"}
)
_RECURRING_VARIABLES = frozenset(
    {"title", "resourceName", "startDate", "endDate", "frequency", "startTime", "endTime", "totalInstances"}
)

DEFAULT_TEMPLATES = [
    Template(
        id="recurring-created-email-es",
        event_type="RecurringReservationCreated",
        channel=ChannelType.EMAIL,
        language="es",
        subject="Reserva periódica creada: {{title}}",
        body=(
            'Su reserva periódica "{{title}}" ha sido creada para el recurso {{resourceName}}.\n\n'
            "Detalles:\n"
            "- Frecuencia: {{frequency}}\n"
            "- Horario: {{startTime}} - {{endTime}}\n"
            "- Período: {{startDate}} - {{endDate}}\n"
            "- Total de instancias: {{totalInstances}}"
        ),
        variables=_RECURRING_VARIABLES,
    ),
    Template(
        id="recurring-created-email-en",
        event_type="RecurringReservationCreated",
        channel=ChannelType.EMAIL,
        language="en",
        subject="Recurring reservation created: {{title}}",
        body=(
            'Your recurring reservation "{{title}}" has been created for resource {{resourceName}}.\n\n'
            "Details:\n"
            "- Frequency: {{frequency}}\n"
            "- Schedule: {{startTime}} - {{endTime}}\n"
            "- Period: {{startDate}} - {{endDate}}\n"
            "- Total instances: {{totalInstances}}"
        ),
        variables=_RECURRING_VARIABLES,
    ),
    Template(
        id="recurring-conflict-email-es",
        event_type="RecurringReservationConflictDetected",
        channel=ChannelType.EMAIL,
        language="es",
        subject="Conflicto detectado: {{title}}",
        body=(
            'Se han detectado {{totalConflicts}} conflictos en su reserva periódica "{{title}}" '
            "para el recurso {{resourceName}}.\n\n"
            "Fechas afectadas: {{conflictDates}}\n\n"
            "Acciones sugeridas: {{suggestedActions}}\n\n"
            "¿Requiere resolución manual? {{resolutionRequired}}"
        ),
        variables=frozenset(
            {"title", "resourceName", "totalConflicts", "conflictDates", "suggestedActions", "resolutionRequired"}
        ),
    ),
    Template(
        id="slot-available-sms-es",
        event_type="WaitingListSlotAvailable",
        channel=ChannelType.SMS,
        language="es",
        body=(
            "BOOKLY: Espacio disponible para {{resourceName}} el {{slotDate}} a las {{slotTime}}. "
            "Posición #{{position}}. Confirme en {{confirmationTimeLimit}} minutos. "
            "Tiempo de espera: {{waitTime}}h."
        ),
        variables=_SLOT_VARIABLES,
    ),
    Template(
        id="slot-available-push-es",
        event_type="WaitingListSlotAvailable",
        channel=ChannelType.PUSH,
        language="es",
        title="¡Espacio disponible!",
        body="{{resourceName}} disponible el {{slotDate}}. ¡Confirme ahora!",
        variables=frozenset({"resourceName", "slotDate", "slotTime"}),
    ),
    Template(
        id="slot-available-in-app-es",
        event_type="WaitingListSlotAvailable",
        channel=ChannelType.IN_APP,
        language="es",
        title="Espacio disponible en {{resourceName}}",
        body="Tiene {{confirmationTimeLimit}} minutos para confirmar el espacio del {{slotDate}} a las {{slotTime}}.",
        variables=_SLOT_VARIABLES,
    ),
    Template(
        id="slot-available-email-es",
        event_type="WaitingListSlotAvailable",
        channel=ChannelType.EMAIL,
        language="es",
        subject="Espacio disponible: {{resourceName}}",
        body=(
            "¡Excelentes noticias! Hay un espacio disponible para {{resourceName}} "
            "el {{slotDate}} a las {{slotTime}}.\n\n"
            "Usted está en la posición #{{position}} y ha esperado {{waitTime}} horas.\n\n"
            "Tiene {{confirmationTimeLimit}} minutos para confirmar su reserva."
        ),
        variables=_SLOT_VARIABLES,
    ),
    Template(
        id="slot-available-email-en",
        event_type="WaitingListSlotAvailable",
        channel=ChannelType.EMAIL,
        language="en",
        subject="Slot available: {{resourceName}}",
        body=(
            "Great news! A slot is available for {{resourceName}} on {{slotDate}} at {{slotTime}}.\n\n"
            "You are in position #{{position}} and have waited {{waitTime}} hours.\n\n"
            "You have {{confirmationTimeLimit}} minutes to confirm your reservation."
        ),
        variables=_SLOT_VARIABLES,
    ),
    Template(
        id="waiting-list-joined-email-es",
        event_type="UserJoinedWaitingList",
        channel=ChannelType.EMAIL,
        language="es",
        subject="Agregado a lista de espera: {{resourceName}}",
        body=(
            "Ha sido agregado a la lista de espera para {{resourceName}}.\n\n"
            "Posición actual: #{{position}}\n"
            "Prioridad: {{priority}}\n"
            "Tiempo estimado de espera: {{estimatedWaitTime}} minutos"
        ),
        variables=frozenset({"resourceName", "position", "priority", "estimatedWaitTime"}),
    ),
    Template(
        id="reassignment-created-email-es",
        event_type="ReassignmentRequestCreated",
        channel=ChannelType.EMAIL,
        language="es",
        subject="Solicitud de reasignación: {{resourceName}}",
        body=(
            "Se ha creado una solicitud de reasignación para su reserva en {{resourceName}}.\n\n"
            "Motivo: {{reason}}\n"
            "Prioridad: {{priority}}\n"
            "Recurso sugerido: {{newResourceName}}\n"
            "Fecha límite de respuesta: {{responseDeadline}}"
        ),
        variables=frozenset({"resourceName", "reason", "priority", "newResourceName", "responseDeadline"}),
    ),
    Template(
        id="reassignment-created-sms-es",
        event_type="ReassignmentRequestCreated",
        channel=ChannelType.SMS,
        language="es",
        body=(
            "BOOKLY: Solicitud de reasignación para {{resourceName}}. Motivo: {{reason}}. "
            "Nuevo recurso: {{newResourceName}}. Responda antes: {{responseDeadline}}"
        ),
        variables=frozenset({"resourceName", "reason", "newResourceName", "responseDeadline"}),
    ),
    Template(
        id="reassignment-applied-email-es",
        event_type="ReassignmentApplied",
        channel=ChannelType.EMAIL,
        language="es",
        subject="Reasignación completada: {{newResourceName}}",
        body=(
            "Su reserva ha sido reasignada.\n\n"
            "Nuevo recurso: {{newResourceName}}\n"
            "Nuevo horario: {{newStartTime}} - {{newEndTime}}\n"
            "Compensación: {{compensationApplied}}\n"
            "ID de nueva reserva: {{newReservationId}}"
        ),
        variables=frozenset(
            {"newResourceName", "newStartTime", "newEndTime", "compensationApplied", "newReservationId"}
        ),
    ),
]


def seed_default_templates(registry) -> int:
    """Load the built-in templates; returns how many were stored."""
    for template in DEFAULT_TEMPLATES:
        registry.put(template)
    return len(DEFAULT_TEMPLATES)
