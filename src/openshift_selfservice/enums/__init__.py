"""Enums for the OpenShift self-service portal."""

from .annotation import NamespaceAnnotation
from .error_code import ErrorCode
from .resource_path import ResourcePath

__all__ = ["ErrorCode", "NamespaceAnnotation", "ResourcePath"]
