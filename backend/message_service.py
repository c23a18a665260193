import logging


logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Hello"


class MessageService:
    """Produces the message text returned to every caller of ``GET /message/``."""

    def get_message(self) -> str:
        logger.debug("Serving message (%d chars).", len(DEFAULT_MESSAGE))
        return DEFAULT_MESSAGE
