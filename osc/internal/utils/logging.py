import logging
import os

import click
import click_log

from osc.internal.utils.constants import LOG_PROTOCOL_TRACE

LEVEL_NAMES = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'TRACE')


def install_logger(logger: logging.Logger, level):
    logger.setLevel(level)
    click_log.ClickHandler._use_stderr = False
    click_log.basic_config(logger)
    return logger


def parse_level(value: str):
    """Map a level name or number given on the command line or in the environment."""

    value = value.strip().upper()
    if value.isdigit():
        return int(value)
    if value == 'TRACE':
        return LOG_PROTOCOL_TRACE
    if value in LEVEL_NAMES:
        return getattr(logging, value)
    return None


# noinspection PyUnusedLocal
def handle_set_level(ctx, param, value):
    from osc.config import Config
    config = ctx.ensure_object(Config)

    env_level = os.environ.get('OSC_LOGLEVEL') or os.environ.get('LOGLEVEL') or 'INFO'
    logger = install_logger(config.logger, parse_level(env_level) or logging.INFO)

    if not value or ctx.resilient_parsing:
        return

    level = parse_level(value)
    if level is None:
        raise click.BadParameter(
            "'{}' is not a log level; use one of {} or a number.".format(
                value, ', '.join(LEVEL_NAMES)))
    logger.setLevel(level)


class LazyLog(object):
    def __init__(self, func):
        self.func = func

    def __str__(self):
        return self.func()
