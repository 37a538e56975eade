"""Namespace billing and ownership annotations."""

import logging

from kubernetes.client.rest import ApiException

from openshift_selfservice.enums import NamespaceAnnotation, ResourcePath
from openshift_selfservice.errors import RemoteAPIError
from openshift_selfservice.utils.client import RemoteAPIClient

logger = logging.getLogger(__name__)


class MetadataStamper:
    """Class for merging billing metadata onto a project namespace."""

    def __init__(self, remote: RemoteAPIClient):
        """Initialize the MetadataStamper.

        Args:
            remote: Client for the OpenShift API
        """
        self.remote = remote

    def stamp(self, project: str, billing: str, mega_id: str, username: str) -> None:
        """Merge billing code, requester and MEGAID into the namespace annotations.

        Other annotations are left untouched. An empty mega_id never clears a
        MEGAID stamped earlier.

        Args:
            project: Project whose namespace is annotated
            billing: Billing code (Kontierungsnummer)
            mega_id: External reference id, may be empty
            username: Acting user, recorded as requester

        Raises:
            RemoteAPIError: If reading or writing the namespace fails
        """
        path = ResourcePath.NAMESPACE.get_path(project)
        try:
            namespace, _ = self.remote.get(path)
        except ApiException as e:
            logger.error(f"Error reading namespace of project '{project}' for user '{username}': {e.status} {e.body}")
            raise RemoteAPIError(details=f"Project: {project}")

        metadata = namespace.setdefault("metadata", {})
        annotations = metadata.get("annotations") or {}
        annotations[NamespaceAnnotation.BILLING.value] = billing
        annotations[NamespaceAnnotation.REQUESTER.value] = username
        if mega_id:
            annotations[NamespaceAnnotation.MEGA_ID.value] = mega_id
        metadata["annotations"] = annotations

        try:
            self.remote.put(path, namespace)
        except ApiException as e:
            logger.error(f"Error updating project config of '{project}' for user '{username}': {e.status} {e.body}")
            raise RemoteAPIError(details=f"Project: {project}")

        logger.info(f"User {username} changed config of project {project}. Kontierungsnummer: {billing}, MegaID: {mega_id}")
