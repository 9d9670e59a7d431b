import logging
import os


logger = logging.getLogger(__name__)

VERSION = '1.0.0'


def int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f'Ignoring {name}={value!r}: not an integer, using {default}')
        return default


LOG_LEVEL = os.getenv('COUNTER_LOG_LEVEL', 'WARNING').upper()
DEFAULT_TOP = int_env('COUNTER_DEFAULT_TOP', 0)
ENCODING = os.getenv('COUNTER_ENCODING', 'utf-8')

VERBOSITY_LEVELS = {
    0: 'WARNING',
    1: 'INFO',
    2: 'DEBUG',
    3: 'DEBUG',
}


def logging_config(level: str = LOG_LEVEL) -> dict:
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(levelname)s %(name)s: %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
            },
        },
        'root': {
            'handlers': ['console'],
            'level': level,
        },
    }


LOGGING = logging_config()
