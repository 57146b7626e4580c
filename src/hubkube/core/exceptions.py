class HubKubeError(Exception):
    """Base exception for HubKube."""

    pass


class ClusterInfoDecodeError(HubKubeError):
    """Raised when an object cannot be decoded as a ManagedClusterInfo."""

    pass


class ProvenanceLookupError(HubKubeError):
    """Raised when the ClusterDeployment lookup fails for a reason other than not-found."""

    pass


class HubClusterIdError(HubKubeError):
    """Raised when the hub cluster id is neither configured nor discoverable."""

    pass
