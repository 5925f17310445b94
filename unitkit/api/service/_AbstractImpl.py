"""Abstract base class for service manager implementations."""

from abc import ABC, abstractmethod

from .ServiceStatus import ServiceStatus


class _AbstractImpl(ABC):
    """Lifecycle operations every service manager backend provides.

    Each operation raises a UnitError subclass on failure and returns nothing
    on success, except ``status`` which reports the observed state.
    """

    @abstractmethod
    def install(self) -> None:
        """Write the unit definition and register it with the manager."""
        pass

    @abstractmethod
    def uninstall(self) -> None:
        """Unregister the unit and remove its definition."""
        pass

    @abstractmethod
    def start(self) -> None:
        """Start the service."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop the service."""
        pass

    @abstractmethod
    def restart(self) -> None:
        """Restart the service."""
        pass

    @abstractmethod
    def status(self) -> ServiceStatus:
        """Query the manager for the current state of the service."""
        pass
