from .listwatch import ListWatch, create_managed_cluster_info_list_watch
from .managed_cluster_info import ClusterDeploymentLookup, ManagedClusterInfoCollector

__all__ = [
    "ClusterDeploymentLookup",
    "ListWatch",
    "ManagedClusterInfoCollector",
    "create_managed_cluster_info_list_watch",
]
