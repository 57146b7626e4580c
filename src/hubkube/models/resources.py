# src/hubkube/models/resources.py
"""
Descriptors for the custom resource kinds read by HubKube and the options
accepted by list and watch calls.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResourceKind(BaseModel):
    """
    Identifies a custom resource collection on the API server.

    Attributes:
        group: API group (e.g. 'hive.openshift.io')
        version: API version within the group (e.g. 'v1')
        plural: Plural resource name used in request paths
        kind: Kind reported in the objects
        namespaced: Whether objects live in namespaces or at cluster scope
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    group: str = Field(..., description="API group")
    version: str = Field(..., description="API version")
    plural: str = Field(..., description="Plural resource name")
    kind: str = Field(..., description="Object kind")
    namespaced: bool = Field(default=True, description="Namespace scoped resource")

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}"

    def __str__(self) -> str:
        return f"{self.plural}.{self.group}/{self.version}"


class ListOptions(BaseModel):
    """
    Selection options forwarded to list and watch requests.
    Unset fields are not sent to the API server.
    """

    model_config = ConfigDict(extra="forbid")

    label_selector: Optional[str] = None
    field_selector: Optional[str] = None
    resource_version: Optional[str] = None
    timeout_seconds: Optional[int] = Field(None, ge=0)
    limit: Optional[int] = Field(None, ge=1)

    def to_kwargs(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


MANAGED_CLUSTER_INFO = ResourceKind(
    group="internal.open-cluster-management.io",
    version="v1beta1",
    plural="managedclusterinfos",
    kind="ManagedClusterInfo",
)

CLUSTER_DEPLOYMENT = ResourceKind(
    group="hive.openshift.io",
    version="v1",
    plural="clusterdeployments",
    kind="ClusterDeployment",
)

CLUSTER_VERSION = ResourceKind(
    group="config.openshift.io",
    version="v1",
    plural="clusterversions",
    kind="ClusterVersion",
    namespaced=False,
)
