"""Namespace annotation keys written by the portal."""

from enum import Enum


class NamespaceAnnotation(Enum):
    """Billing and ownership annotations stamped onto a project namespace."""

    BILLING = "openshift.io/kontierung-element"
    REQUESTER = "openshift.io/requester"
    MEGA_ID = "openshift.io/MEGAID"

    def __str__(self) -> str:
        return self.value
