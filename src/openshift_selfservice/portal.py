"""Caller-facing self-service operations."""

import logging
from typing import Optional

from openshift_selfservice import messages
from openshift_selfservice.config import PortalConfig
from openshift_selfservice.errors import SelfServiceError
from openshift_selfservice.managers import MetadataStamper, PermissionGate, ProjectProvisioner, QuotaManager
from openshift_selfservice.models import (
    ApiResponse,
    EditBillingCommand,
    EditQuotaCommand,
    NewProjectCommand,
    NewTestProjectCommand,
)
from openshift_selfservice.utils.client import RemoteAPIClient
from openshift_selfservice.validation import require_non_empty

logger = logging.getLogger(__name__)


class SelfServicePortal:
    """Entry point wiring the managers together.

    Every operation answers with an ApiResponse carrying a localized message.
    Mutations of existing projects are only executed for project admins.
    """

    def __init__(self, config: PortalConfig, remote: Optional[RemoteAPIClient] = None):
        """Initialize the portal.

        Args:
            config: Portal configuration
            remote: Client for the OpenShift API, created from config if not given
        """
        self.config = config
        self.remote = remote or RemoteAPIClient.from_config(config)
        self.permission_gate = PermissionGate(self.remote)
        self.metadata_stamper = MetadataStamper(self.remote)
        self.quota_manager = QuotaManager(self.remote, config)
        self.provisioner = ProjectProvisioner(
            self.remote, config, self.permission_gate, self.metadata_stamper
        )

    def new_project(self, username: str, command: NewProjectCommand) -> ApiResponse:
        try:
            self.provisioner.provision(
                username, command.project, command.mega_id, command.billing, is_test_project=False
            )
        except SelfServiceError as e:
            return self._failure(e, username, command.project)
        return ApiResponse.success(messages.PROJECT_CREATED)

    def new_test_project(self, username: str, command: NewTestProjectCommand) -> ApiResponse:
        try:
            self.provisioner.provision_test_project(username, command.project)
        except SelfServiceError as e:
            return self._failure(e, username, command.project)
        return ApiResponse.success(messages.TEST_PROJECT_CREATED)

    def update_billing(self, username: str, command: EditBillingCommand) -> ApiResponse:
        """Replace the billing code of a project the user administers."""
        try:
            require_non_empty(command.project, messages.PROJECT_NAME_REQUIRED)
            require_non_empty(command.billing, messages.BILLING_REQUIRED)
            self.permission_gate.check_admin(username, command.project)
            self.metadata_stamper.stamp(command.project, command.billing, "", username)
        except SelfServiceError as e:
            return self._failure(e, username, command.project)
        return ApiResponse.success(messages.BILLING_SAVED)

    def update_quota(self, username: str, command: EditQuotaCommand) -> ApiResponse:
        """Change CPU and memory quotas of a project the user administers.

        Input is validated before the permission check so invalid requests
        never reach the API.
        """
        try:
            self.quota_manager.validate_quota(command.project, command.cpu, command.memory)
            self.permission_gate.check_admin(username, command.project)
            self.quota_manager.update_quota(username, command.project, command.cpu, command.memory)
        except SelfServiceError as e:
            return self._failure(e, username, command.project)
        return ApiResponse.success(messages.QUOTA_SAVED)

    def _failure(self, error: SelfServiceError, username: str, project: str) -> ApiResponse:
        logger.debug(f"Operation by '{username}' on project '{project}' failed with {error.code.value}: {error.message}")
        return ApiResponse.from_exception(error, project=project, user=username)
