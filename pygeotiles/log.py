# =================================================================
#
# Authors: pygeotiles contributors
#
# Copyright (c) 2026 pygeotiles contributors
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use,
# copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,
# WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
# =================================================================

"""Logging system"""

import logging
from logging.handlers import RotatingFileHandler
from logging.handlers import TimedRotatingFileHandler
import sys

LOGGER = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = (
    '[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s'
)
DEFAULT_DATE_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def _get_handler(logging_config: dict) -> logging.Handler:
    """
    Build the log handler matching the logfile/rotation configuration

    :param logging_config: logging specific configuration

    :returns: `logging.Handler`
    """

    logfile = logging_config.get('logfile')
    if not logfile:
        return logging.StreamHandler(sys.stdout)

    rotation = logging_config.get('rotation')
    if not rotation:
        return logging.FileHandler(logfile)

    rotate_mode = rotation.get('mode')
    rotate_backup_count = rotation.get('backup_count', 0)

    if rotate_mode == 'size':
        return RotatingFileHandler(
            filename=logfile,
            maxBytes=rotation.get('max_bytes', 0),
            backupCount=rotate_backup_count
        )
    elif rotate_mode == 'time':
        return TimedRotatingFileHandler(
            filename=logfile,
            when=rotation.get('when', 'h'),
            interval=rotation.get('interval', 1),
            backupCount=rotate_backup_count
        )

    raise ValueError(f'Invalid rotation mode: {rotate_mode}')


def setup_logger(logging_config: dict) -> None:
    """
    Setup configuration

    :param logging_config: logging specific configuration

    :returns: void (creates logging instance)
    """

    loglevel = logging.getLevelName(logging_config.get('level', 'ERROR'))
    if not isinstance(loglevel, int):
        raise ValueError(f'Invalid log level: {logging_config["level"]}')

    logging.basicConfig(
        handlers=[_get_handler(logging_config)],
        level=loglevel,
        datefmt=logging_config.get('dateformat', DEFAULT_DATE_FORMAT),
        format=logging_config.get('logformat', DEFAULT_LOG_FORMAT),
        force=True
    )

    LOGGER.debug('Logging initialized')
