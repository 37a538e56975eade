"""OpenShift project managers."""

from .metadata import MetadataStamper
from .permission import PermissionGate
from .project import ProjectProvisioner
from .quota import QuotaManager

__all__ = ["MetadataStamper", "PermissionGate", "ProjectProvisioner", "QuotaManager"]
