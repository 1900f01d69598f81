from typing import Callable

from src.service.seat_booking.app.interface.i_confirmation_service import IConfirmationService


class ConsoleConfirmationService(IConfirmationService):
    """Interactive y/N prompt on the terminal. Anything but "y"/"yes" declines."""

    def __init__(self, *, input_func: Callable[[str], str] = input) -> None:
        self.input_func = input_func

    def confirm(self, message: str) -> bool:
        try:
            answer = self.input_func(f'{message}\n[y/N]: ')
        except EOFError:
            return False
        return answer.strip().lower() in ('y', 'yes')
