import logging

from settings import Settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level)
    for name in settings.noisy_library_loggers:
        logging.getLogger(name).setLevel(settings.noisy_lib_log_level)
