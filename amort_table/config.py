import logging
import logging.config
import os

# Form defaults shown on first load
DEFAULT_PRINCIPAL = 200000.0
DEFAULT_ANNUAL_RATE = 6.5
DEFAULT_TERM_YEARS = 30

# Input bounds; the closed-form balance loses precision beyond these
MAX_PRINCIPAL = 100_000_000.0
MAX_ANNUAL_RATE = 20.0
MAX_TERM_YEARS = 40

PERIODS_PER_YEAR = 12
CURRENCY_SYMBOL = "€"

LOG_LEVEL = os.environ.get("AMORT_TABLE_LOG_LEVEL", "INFO").upper()

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'amort_table': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}


def setup_logging():
    logging.config.dictConfig(LOGGING_CONFIG)
