import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class BsCalendarConfig(AppConfig):
    name = 'bs_calendar'
    verbose_name = 'Bikram Sambat Calendar'

    def ready(self):
        from .utils import default_calendar

        logger.debug("Loaded %r", default_calendar)
