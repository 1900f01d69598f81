from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_confirmation_service import IConfirmationService


class StaticConfirmationService(IConfirmationService):
    """
    Answers with a decision made before the call.

    HTTP clients show the prompt themselves and send the user's answer along
    with the request.
    """

    def __init__(self, *, answer: bool) -> None:
        self.answer = answer

    def confirm(self, message: str) -> bool:
        Logger.base.info(f'❓ [CONFIRM] {message!r} -> {"yes" if self.answer else "no"}')
        return self.answer
