from abc import ABC, abstractmethod


class IConfirmationService(ABC):
    """Yes/no question put to the user before a destructive or committing action."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        pass
