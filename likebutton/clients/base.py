from abc import ABC, abstractmethod

class BaseClient(ABC):
    """
    Abstract base class for backend service clients.

    Every client exposes an availability check so that dependent
    features can degrade gracefully when the service is missing.
    """

    # Name reported by health checks
    service_name: str = ""

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the service credentials are configured.

        Must not perform network I/O.

        Returns:
            True if available
        """
        pass
