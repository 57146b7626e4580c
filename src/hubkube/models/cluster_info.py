# src/hubkube/models/cluster_info.py
"""
Pydantic models for the ManagedClusterInfo custom resource
(internal.open-cluster-management.io/v1beta1).

Only the fields used for metric generation are modelled; everything else
in the object is ignored.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KubeVendor(str, Enum):
    """Kubernetes distribution reported by the cluster agent."""

    KUBERNETES = "Kubernetes"
    OPENSHIFT = "OpenShift"
    AKS = "AKS"
    EKS = "EKS"
    GKE = "GKE"
    ICP = "ICP"
    IKS = "IKS"
    OPENSHIFT_DEDICATED = "OpenShiftDedicated"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


class CloudVendor(str, Enum):
    """Cloud provider hosting the cluster. Values are the display strings used as labels."""

    AWS = "Amazon"
    AZURE = "Azure"
    GCP = "Google"
    IBM = "IBM"
    IBMZ = "IBMZPlatform"
    VSPHERE = "VSphere"
    OPENSTACK = "Openstack"
    BAREMETAL = "BareMetal"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value):
        # Accept member names too ('AWS', 'gcp'), anything else is Other.
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        return cls.OTHER

    @property
    def display_name(self) -> str:
        return self.value


class DistributionType(str, Enum):
    OCP = "OCP"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ObjectMeta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    namespace: str = ""


class NodeStatus(BaseModel):
    """
    One entry of status.nodeList.

    Attributes:
        name: Node name
        labels: Node labels, values may be empty strings
        capacity: Resource name to quantity ('cpu': '4', 'memory': '16Gi')
    """

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    labels: Dict[str, str] = Field(default_factory=dict)
    capacity: Dict[str, Union[str, int, float]] = Field(default_factory=dict)

    @field_validator("labels", "capacity", mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return {} if value is None else value


class OCPDistributionInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    version: Optional[str] = None

    @field_validator("version", mode="before")
    @classmethod
    def _blank_version(cls, value):
        return _blank_to_none(value)


class DistributionInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Optional[DistributionType] = None
    ocp: OCPDistributionInfo = Field(default_factory=OCPDistributionInfo)

    @field_validator("type", mode="before")
    @classmethod
    def _blank_type(cls, value):
        return _blank_to_none(value)

    @field_validator("ocp", mode="before")
    @classmethod
    def _null_ocp(cls, value):
        return {} if value is None else value


class ClusterInfoStatus(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    kube_vendor: Optional[KubeVendor] = Field(None, alias="kubeVendor")
    cloud_vendor: Optional[CloudVendor] = Field(None, alias="cloudVendor")
    version: Optional[str] = None
    cluster_id: Optional[str] = Field(None, alias="clusterID")
    distribution_info: DistributionInfo = Field(default_factory=DistributionInfo, alias="distributionInfo")
    node_list: List[NodeStatus] = Field(default_factory=list, alias="nodeList")

    @field_validator("kube_vendor", "cloud_vendor", "version", "cluster_id", mode="before")
    @classmethod
    def _blank_fields(cls, value):
        return _blank_to_none(value)

    @field_validator("distribution_info", mode="before")
    @classmethod
    def _null_distribution(cls, value):
        return {} if value is None else value

    @field_validator("node_list", mode="before")
    @classmethod
    def _null_nodes(cls, value):
        return [] if value is None else value


class ManagedClusterInfo(BaseModel):
    """
    Typed view of a ManagedClusterInfo object as returned by the API server.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    api_version: Optional[str] = Field(None, alias="apiVersion")
    kind: Optional[str] = None
    metadata: ObjectMeta
    status: ClusterInfoStatus = Field(default_factory=ClusterInfoStatus)

    @field_validator("status", mode="before")
    @classmethod
    def _null_status(cls, value):
        return {} if value is None else value

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace
