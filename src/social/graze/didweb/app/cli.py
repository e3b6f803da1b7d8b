import os
import logging
from logging.config import dictConfig
import json

import sentry_sdk

from social.graze.didweb.app.config import Settings


def configure_logging(settings: Settings):
    logging_config_file = os.getenv("LOGGING_CONFIG_FILE", "")

    if len(logging_config_file) > 0:
        with open(logging_config_file) as fl:
            dictConfig(json.load(fl))
        return

    logging.basicConfig()
    logging.getLogger().setLevel(logging.DEBUG if settings.debug else logging.INFO)


def configure_sentry(settings: Settings):
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)
