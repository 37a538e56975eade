"""Self-service provisioning and administration of OpenShift projects."""

from .config import PortalConfig
from .portal import SelfServicePortal

__all__ = ["PortalConfig", "SelfServicePortal"]
