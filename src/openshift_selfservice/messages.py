"""User-facing messages returned by the portal.

Messages are shown to end users as-is, so they are kept in the portal's
display language (German).
"""

GENERIC_API_ERROR = "Fehler beim Aufruf der OpenShift-API. Bitte versuche es erneut oder öffne ein Ticket"
PROJECT_NAME_REQUIRED = "Projektname muss angegeben werden"
BILLING_REQUIRED = "Kontierungsnummer muss angegeben werden"
PROJECT_ALREADY_EXISTS = "Das Projekt existiert bereits"
PROJECT_NOT_FOUND = "Projekt konnte nicht gefunden werden"
NO_ADMIN_RIGHTS = "Du hast auf dem Projekt keine Admin-Rechte"
QUOTA_NOT_FOUND = "Für das Projekt ist keine Quota definiert"
ADMIN_BINDING_NOT_FOUND = "Für das Projekt existiert keine Admin-Rolle"

PROJECT_CREATED = "Das Projekt wurde erstellt"
TEST_PROJECT_CREATED = "Das Test-Projekt wurde erstellt"
BILLING_SAVED = "Die neuen Daten wurden gespeichert"
QUOTA_SAVED = "Die Quotas wurden angepasst"


def max_cpu_exceeded(max_cpu: int) -> str:
    return f"Es können maximal {max_cpu} CPU Cores vergeben werden."


def max_memory_exceeded(max_memory: int) -> str:
    return f"Es können maximal {max_memory}GB Memory vergeben werden."
