"""Project provisioning workflow."""

import logging

from kubernetes.client.rest import ApiException

from openshift_selfservice import messages
from openshift_selfservice.config import PortalConfig
from openshift_selfservice.enums import ResourcePath
from openshift_selfservice.errors import Conflict, RemoteAPIError
from openshift_selfservice.managers.metadata import MetadataStamper
from openshift_selfservice.managers.permission import PermissionGate
from openshift_selfservice.utils.client import RemoteAPIClient
from openshift_selfservice.validation import require_non_empty

logger = logging.getLogger(__name__)

HTTP_CREATED = 201
HTTP_CONFLICT = 409


class ProjectProvisioner:
    """Creates projects and hands them over to the requesting user.

    Provisioning runs create -> grant admin -> stamp metadata strictly in
    sequence. The first failing step aborts the workflow; steps already done
    are not rolled back, so a failure after the create step leaves an existing
    but incompletely configured project behind.
    """

    def __init__(
        self,
        remote: RemoteAPIClient,
        config: PortalConfig,
        permission_gate: PermissionGate,
        metadata_stamper: MetadataStamper,
    ):
        """Initialize the ProjectProvisioner.

        Args:
            remote: Client for the OpenShift API
            config: Portal configuration
            permission_gate: Grants admin rights on the new project
            metadata_stamper: Stamps billing metadata onto the new project
        """
        self.remote = remote
        self.config = config
        self.permission_gate = permission_gate
        self.metadata_stamper = metadata_stamper

    def provision(
        self,
        username: str,
        project_name: str,
        mega_id: str,
        billing: str,
        is_test_project: bool = False,
    ) -> None:
        """Create a project, make the user its admin and stamp its metadata.

        Args:
            username: Requesting user, becomes project admin
            project_name: Name of the new project
            mega_id: External reference id, may be empty
            billing: Billing code, may only be empty for test projects
            is_test_project: Skip the billing check

        Raises:
            ValidationError: If the project name or billing code is missing
            Conflict: If the project already exists
            RemoteAPIError: If any remote step fails
            NotFound: If the new project has no admin role binding
        """
        require_non_empty(project_name, messages.PROJECT_NAME_REQUIRED)
        if not is_test_project:
            require_non_empty(billing, messages.BILLING_REQUIRED)

        self._create_project(username, project_name)
        self.permission_gate.grant_admin(project_name, username)
        self.metadata_stamper.stamp(project_name, billing, mega_id, username)

        logger.info(f"{username} provisioned project {project_name}")

    def provision_test_project(self, username: str, project_name: str) -> str:
        """Create a personal test project prefixed with the user's name.

        Test projects are billed to a fixed sentinel code and carry no MEGAID.

        Args:
            username: Requesting user
            project_name: Name suffix of the test project

        Returns:
            Full name of the created project
        """
        require_non_empty(project_name, messages.PROJECT_NAME_REQUIRED)
        full_name = f"{username}-{project_name}"

        self.provision(
            username,
            full_name,
            mega_id="",
            billing=self.config.test_project_billing,
            is_test_project=True,
        )
        return full_name

    def _create_project(self, username: str, project_name: str) -> None:
        """Send the project request.

        Raises:
            Conflict: On HTTP 409
            RemoteAPIError: On any other status than 201
        """
        project_request = {
            "kind": "ProjectRequest",
            "apiVersion": "v1",
            "metadata": {"name": project_name},
        }

        try:
            data, status = self.remote.post(ResourcePath.PROJECT_REQUESTS.get_path(), project_request)
        except ApiException as e:
            if e.status == HTTP_CONFLICT:
                logger.info(f"{username} requested project {project_name} which already exists")
                raise Conflict(details=f"Project: {project_name}")
            logger.error(f"Error creating new project '{project_name}' for user '{username}': {e.status} {e.body}")
            raise RemoteAPIError(details=f"Project: {project_name}")

        if status != HTTP_CREATED:
            logger.error(f"Error creating new project '{project_name}' for user '{username}': unexpected status {status} {data}")
            raise RemoteAPIError(details=f"Project: {project_name}")

        logger.info(f"{username} created a new project: {project_name}")
