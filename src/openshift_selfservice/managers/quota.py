"""Project resource quota management."""

import logging

from kubernetes.client.rest import ApiException

from openshift_selfservice import messages
from openshift_selfservice.config import PortalConfig
from openshift_selfservice.enums import ResourcePath
from openshift_selfservice.errors import NotFound, RemoteAPIError, ValidationError
from openshift_selfservice.utils.client import RemoteAPIClient
from openshift_selfservice.validation import require_non_empty

logger = logging.getLogger(__name__)


class QuotaManager:
    """Class for validating and applying CPU and memory quotas of a project."""

    def __init__(self, remote: RemoteAPIClient, config: PortalConfig):
        """Initialize the QuotaManager.

        Args:
            remote: Client for the OpenShift API
            config: Portal configuration providing the quota ceilings
        """
        self.remote = remote
        self.config = config

    def validate_quota(self, project: str, cpu: int, memory: int) -> None:
        """Check quota input against the configured ceilings.

        Args:
            project: Project name
            cpu: Requested CPU cores
            memory: Requested memory in GiB

        Raises:
            ValidationError: If the project is empty or a ceiling is exceeded
        """
        require_non_empty(project, messages.PROJECT_NAME_REQUIRED)

        if cpu > self.config.max_cpu:
            raise ValidationError(messages.max_cpu_exceeded(self.config.max_cpu))

        if memory > self.config.max_memory:
            raise ValidationError(messages.max_memory_exceeded(self.config.max_memory))

    def update_quota(self, username: str, project: str, cpu: int, memory: int) -> None:
        """Set the hard CPU and memory limits of a project's quota.

        The first quota document of the project is authoritative. Memory is
        always written in GiB.

        Args:
            username: Acting user, for the audit log
            project: Project to update
            cpu: CPU cores
            memory: Memory in GiB

        Raises:
            ValidationError: If the input is invalid
            NotFound: If the project has no quota document
            RemoteAPIError: If reading or writing the quota fails
        """
        self.validate_quota(project, cpu, memory)

        try:
            quotas, _ = self.remote.get(ResourcePath.RESOURCE_QUOTAS.get_path(project))
        except ApiException as e:
            logger.error(f"Error reading quotas of project '{project}' for user '{username}': {e.status} {e.body}")
            raise RemoteAPIError(details=f"Project: {project}")

        items = (quotas or {}).get("items") or []
        if not items:
            logger.error(f"Project '{project}' has no resource quota")
            raise NotFound(messages.QUOTA_NOT_FOUND, details=f"Project: {project}")

        quota = items[0]
        hard = quota.setdefault("spec", {}).setdefault("hard", {})
        hard["cpu"] = cpu
        hard["memory"] = f"{memory}Gi"

        quota_name = quota.get("metadata", {}).get("name")
        try:
            self.remote.put(ResourcePath.RESOURCE_QUOTAS.get_path(project, quota_name), quota)
        except ApiException as e:
            logger.error(f"Error updating quota '{quota_name}' of project '{project}' for user '{username}': {e.status} {e.body}")
            raise RemoteAPIError(details=f"Project: {project}")

        logger.info(f"User {username} changed quotas for project {project}. CPU: {cpu}, Mem: {memory}")
