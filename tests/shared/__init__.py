"""Shared test objects package.

Contains the fake OpenShift API and scenario data used across tests.
"""

from .fake_api import FakeApiClient, RecordedCall
from .test_data import AdminCheckScenario, QuotaScenario, ProvisionScenario

__all__ = ["FakeApiClient", "RecordedCall", "AdminCheckScenario", "QuotaScenario", "ProvisionScenario"]
