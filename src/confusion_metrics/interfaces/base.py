"""Base interface definition."""

from abc import ABC, abstractmethod

from confusion_metrics.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Abstract base class for application interfaces."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
