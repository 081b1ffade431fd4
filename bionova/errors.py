"""Exception taxonomy for the research explorer backend"""

from typing import Optional


class BionovaError(Exception):
    """Base class for all errors raised by this package"""


class GraphValidationError(BionovaError):
    """A graph link or lookup references a node id that does not exist"""

    def __init__(self, message: str, node_id: Optional[str] = None):
        super().__init__(message)
        self.node_id = node_id


class ProviderError(BionovaError):
    """The model provider failed to produce a result"""


class ProviderNotConfiguredError(ProviderError):
    """The active provider has no API key"""


class ProviderResponseError(ProviderError):
    """The provider answered, but not with JSON matching the result schema"""


class ClientError(BionovaError):
    """Raised by ResearchClient when a backend call fails"""


class ConnectivityError(ClientError):
    """The backend service could not be reached at all"""


class BackendError(ClientError):
    """The backend answered with an error status or an unreadable body"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
