"""Pytest configuration and fixtures."""

import logging

import pytest

from openshift_selfservice import PortalConfig, SelfServicePortal
from openshift_selfservice.enums import ResourcePath
from openshift_selfservice.managers import MetadataStamper, PermissionGate, ProjectProvisioner, QuotaManager
from openshift_selfservice.utils.client import RemoteAPIClient
from .constants.config import Config
from .shared import FakeApiClient

logger = logging.getLogger(__name__)


def policy_bindings_document(admin_user_names: list[str] | None = None) -> dict:
    """Build a policy bindings document with an admin and an unrelated edit role."""
    admin_user_names = admin_user_names or []
    return {
        "kind": "PolicyBinding",
        "metadata": {"name": ":default", "resourceVersion": "7"},
        "roleBindings": [
            {
                "name": "edit",
                "roleBinding": {
                    "userNames": ["bob"],
                    "subjects": [{"kind": "User", "name": "bob"}],
                },
            },
            {
                "name": "admin",
                "roleBinding": {
                    "userNames": list(admin_user_names),
                    "subjects": [{"kind": "User", "name": name} for name in admin_user_names],
                },
            },
        ],
    }


def namespace_document(project: str, annotations: dict | None = None) -> dict:
    return {
        "kind": "Namespace",
        "apiVersion": "v1",
        "metadata": {
            "name": project,
            "annotations": dict(annotations or {"openshift.io/display-name": project}),
        },
        "status": {"phase": "Active"},
    }


def quota_list_document(quota_names: list[str] | None = None) -> dict:
    quota_names = ["default-quota"] if quota_names is None else quota_names
    return {
        "kind": "ResourceQuotaList",
        "items": [
            {
                "metadata": {"name": name},
                "spec": {"hard": {"cpu": "2", "memory": "4Gi", "pods": "20"}},
            }
            for name in quota_names
        ],
    }


@pytest.fixture
def config() -> PortalConfig:
    return PortalConfig(
        api_url=Config.API_URL,
        token=Config.TOKEN,
        max_cpu=Config.MAX_CPU,
        max_memory=Config.MAX_MEMORY,
    )


@pytest.fixture
def fake_api() -> FakeApiClient:
    return FakeApiClient()


@pytest.fixture
def remote(fake_api) -> RemoteAPIClient:
    return RemoteAPIClient(fake_api)


@pytest.fixture
def existing_project(fake_api) -> str:
    """Register a provisioned project whose admin is Config.USERNAME."""
    project = Config.PROJECT
    fake_api.add_document(
        ResourcePath.POLICY_BINDINGS.get_path(project),
        policy_bindings_document([Config.USERNAME.lower(), Config.USERNAME.upper()]),
    )
    fake_api.add_document(ResourcePath.NAMESPACE.get_path(project), namespace_document(project))
    fake_api.add_document(ResourcePath.RESOURCE_QUOTAS.get_path(project), quota_list_document())
    logger.debug(f"Registered project '{project}' in fake API")
    return project


@pytest.fixture
def new_project(fake_api) -> str:
    """Register the documents the platform creates along with a new project."""
    project = "fresh-project"
    fake_api.add_document(ResourcePath.POLICY_BINDINGS.get_path(project), policy_bindings_document())
    fake_api.add_document(ResourcePath.NAMESPACE.get_path(project), namespace_document(project))
    return project


@pytest.fixture
def permission_gate(remote) -> PermissionGate:
    return PermissionGate(remote)


@pytest.fixture
def metadata_stamper(remote) -> MetadataStamper:
    return MetadataStamper(remote)


@pytest.fixture
def quota_manager(remote, config) -> QuotaManager:
    return QuotaManager(remote, config)


@pytest.fixture
def provisioner(remote, config, permission_gate, metadata_stamper) -> ProjectProvisioner:
    return ProjectProvisioner(remote, config, permission_gate, metadata_stamper)


@pytest.fixture
def portal(config, remote) -> SelfServicePortal:
    return SelfServicePortal(config, remote=remote)
