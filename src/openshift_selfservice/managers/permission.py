"""Project admin permission checks and grants."""

import logging
from typing import Optional

from kubernetes.client.rest import ApiException

from openshift_selfservice import messages
from openshift_selfservice.enums import ResourcePath
from openshift_selfservice.errors import NotFound, PermissionDenied, RemoteAPIError
from openshift_selfservice.utils.client import RemoteAPIClient

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


class PermissionGate:
    """Class for checking and granting admin rights through policy bindings."""

    def __init__(self, remote: RemoteAPIClient):
        """Initialize the PermissionGate.

        Args:
            remote: Client for the OpenShift API
        """
        self.remote = remote

    def check_admin(self, username: str, project: str) -> None:
        """Verify that a user is admin of a project.

        Grantee names are compared case-insensitively.

        Args:
            username: Acting user
            project: Project to check

        Raises:
            NotFound: If the policy bindings cannot be fetched
            PermissionDenied: If the user is not listed in the admin role binding
        """
        try:
            policy_bindings, _ = self.remote.get(ResourcePath.POLICY_BINDINGS.get_path(project))
        except ApiException as e:
            logger.error(f"Unable to read policy bindings of project '{project}' for user '{username}': {e.status} {e.body}")
            raise NotFound(details=f"Project: {project}")

        admin_binding = find_role_binding(policy_bindings, ADMIN_ROLE)
        if admin_binding is not None:
            user_names = (admin_binding.get("roleBinding") or {}).get("userNames") or []
            if any(isinstance(name, str) and name.lower() == username.lower() for name in user_names):
                logger.debug(f"User '{username}' is admin of project '{project}'")
                return

        logger.warning(f"User {username} cannot edit project {project} as they have no admin rights")
        raise PermissionDenied(details=f"User: {username}, Project: {project}")

    def grant_admin(self, project: str, username: str) -> None:
        """Add a user to the admin role binding of a project.

        The user is added twice, once lowercased and once uppercased, to the
        user names and to the subjects. The authorization store matches names
        case-sensitively, so both spellings have to be present.

        Args:
            project: Project to grant admin rights on
            username: User receiving admin rights

        Raises:
            RemoteAPIError: If reading or writing the policy bindings fails
            NotFound: If the project has no admin role binding
        """
        path = ResourcePath.POLICY_BINDINGS.get_path(project)
        try:
            policy_bindings, _ = self.remote.get(path)
        except ApiException as e:
            logger.error(f"Error reading policy bindings of project '{project}': {e.status} {e.body}")
            raise RemoteAPIError(details=f"Project: {project}")

        admin_binding = find_role_binding(policy_bindings, ADMIN_ROLE)
        if admin_binding is None:
            logger.error(f"Project '{project}' has no '{ADMIN_ROLE}' role binding, cannot grant '{username}'")
            raise NotFound(messages.ADMIN_BINDING_NOT_FOUND, details=f"Project: {project}")

        role_binding = admin_binding.get("roleBinding") or {}
        admin_binding["roleBinding"] = role_binding
        user_names = role_binding.get("userNames") or []
        subjects = role_binding.get("subjects") or []
        for name in (username.lower(), username.upper()):
            user_names.append(name)
            subjects.append({"kind": "User", "name": name})
        role_binding["userNames"] = user_names
        role_binding["subjects"] = subjects

        try:
            self.remote.put(path, policy_bindings)
        except ApiException as e:
            logger.error(f"Error updating project permissions of '{project}': {e.status} {e.body}")
            raise RemoteAPIError(details=f"Project: {project}")

        logger.info(f"{username} is now admin of {project}")


def find_role_binding(policy_bindings: Optional[dict], role_name: str) -> Optional[dict]:
    """Return the first role binding entry with the given name, if any."""
    if not policy_bindings:
        return None
    for role_binding in policy_bindings.get("roleBindings") or []:
        if role_binding.get("name") == role_name:
            return role_binding
    return None
