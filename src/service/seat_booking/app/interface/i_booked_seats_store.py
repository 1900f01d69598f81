"""
Booked Seats Store Interface

Key-value persistence for the durable booking record.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IBookedSeatsStore(ABC):
    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """
        Read a stored value

        Args:
            key: Storage key

        Returns:
            The stored string, or None when nothing is stored under the key
        """
        pass

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """
        Overwrite the value stored under a key

        Args:
            key: Storage key
            value: Full replacement value
        """
        pass
