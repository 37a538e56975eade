"""Portal configuration."""

import os

from pydantic import BaseModel, ConfigDict, Field

TEST_PROJECT_BILLING = "keine-verrechnung"


class PortalConfig(BaseModel):
    """Process-wide settings, constructed once and handed to every component."""

    api_url: str = Field(..., description="Base URL of the OpenShift API, e.g. https://master:8443")
    token: str = Field(..., description="Bearer token of the service account acting on behalf of users")
    max_cpu: int = Field(30, description="Highest CPU core count a user may assign to a project")
    max_memory: int = Field(50, description="Highest memory in GiB a user may assign to a project")
    verify_ssl: bool = Field(True, description="Verify the API server certificate")
    test_project_billing: str = Field(TEST_PROJECT_BILLING, description="Billing code stamped onto test projects")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "PortalConfig":
        """Build the configuration from environment variables.

        Returns:
            PortalConfig populated from OPENSHIFT_API_URL, OPENSHIFT_TOKEN,
            MAX_CPU, MAX_MEMORY and DISABLE_TLS

        Raises:
            ValueError: If the API URL or token is not set
        """
        api_url = os.getenv("OPENSHIFT_API_URL", "")
        token = os.getenv("OPENSHIFT_TOKEN", "")
        if not api_url:
            raise ValueError("OPENSHIFT_API_URL must be set")
        if not token:
            raise ValueError("OPENSHIFT_TOKEN must be set")

        return cls(
            api_url=api_url.rstrip("/"),
            token=token,
            max_cpu=int(os.getenv("MAX_CPU", "30")),
            max_memory=int(os.getenv("MAX_MEMORY", "50")),
            verify_ssl=os.getenv("DISABLE_TLS", "false") != "true",
        )
