"""Platform API resource paths used by the portal."""

from enum import Enum
from typing import Optional


class ResourcePath(Enum):
    """REST resources consumed on the OpenShift API.

    OpenShift specific resources (project requests, policy bindings) are served
    from the legacy ``oapi/v1`` group, core Kubernetes resources from ``api/v1``.
    """

    PROJECT_REQUESTS = "projectrequests"
    POLICY_BINDINGS = "policybindings"
    RESOURCE_QUOTAS = "resourcequotas"
    NAMESPACE = "namespaces"

    def get_api_prefix(self) -> str:
        """Get the API group prefix serving this resource.

        Returns:
            Either 'oapi/v1' or 'api/v1'
        """
        prefix_mapping = {
            ResourcePath.PROJECT_REQUESTS: "oapi/v1",
            ResourcePath.POLICY_BINDINGS: "oapi/v1",
            ResourcePath.RESOURCE_QUOTAS: "api/v1",
            ResourcePath.NAMESPACE: "api/v1",
        }
        return prefix_mapping[self]

    def get_path(self, project: Optional[str] = None, name: Optional[str] = None) -> str:
        """Build the request path for this resource.

        Args:
            project: Namespace the resource lives in (ignored for project requests)
            name: Optional name of a single document within the collection

        Returns:
            Path relative to the API base URL, e.g. 'api/v1/namespaces/foo/resourcequotas'
        """
        prefix = self.get_api_prefix()
        if self is ResourcePath.PROJECT_REQUESTS:
            return f"/{prefix}/projectrequests"
        if self is ResourcePath.NAMESPACE:
            return f"/{prefix}/namespaces/{project}"
        if self is ResourcePath.POLICY_BINDINGS:
            # The default binding document is literally named ':default'
            return f"/{prefix}/namespaces/{project}/policybindings/:default"

        path = f"/{prefix}/namespaces/{project}/{self.value}"
        if name:
            path = f"{path}/{name}"
        return path
