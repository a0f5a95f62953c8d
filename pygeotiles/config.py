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

import click
from copy import deepcopy
import json
from jsonschema import validate as jsonschema_validate
import logging
import os
import yaml

from pygeotiles.util import to_json, yaml_load, SCHEMASDIR

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'logging': {
        'level': 'ERROR'
    },
    'fetch': {
        'timeout': 30,
        'headers': {},
        'verify': True
    }
}


def get_config(raw: bool = False) -> dict:
    """
    Get pygeotiles configuration

    Sections found in the file named by the PYGEOTILES_CONFIG environment
    variable are merged over the defaults; without the variable the
    defaults are returned.

    :param raw: `bool` over interpolation during config loading

    :returns: `dict` of pygeotiles configuration
    """

    config_ = deepcopy(DEFAULT_CONFIG)

    config_file = os.environ.get('PYGEOTILES_CONFIG')
    if not config_file:
        LOGGER.debug('PYGEOTILES_CONFIG not set, using default configuration')
        return config_

    with open(config_file, encoding='utf8') as fh:
        if raw:
            loaded = yaml.safe_load(fh)
        else:
            loaded = yaml_load(fh)

    for section, values in (loaded or {}).items():
        if isinstance(values, dict) and isinstance(config_.get(section), dict):
            config_[section].update(values)
        else:
            config_[section] = values

    return config_


def load_schema() -> dict:
    """ Reads the JSON schema YAML file. """

    schema_file = SCHEMASDIR / 'config' / 'pygeotiles-config-0.x.yml'

    with schema_file.open() as fh2:
        return yaml_load(fh2)


def validate_config(instance_dict: dict) -> bool:
    """
    Validate pygeotiles configuration against pygeotiles schema

    :param instance_dict: dict of configuration

    :returns: `bool` of validation
    """

    jsonschema_validate(json.loads(to_json(instance_dict)), load_schema())

    return True


@click.group()
def config():
    """Configuration management"""
    pass


@click.command()
@click.pass_context
@click.option('--config', '-c', 'config_file', help='configuration file')
def validate(ctx, config_file):
    """Validate configuration"""

    if config_file is None:
        raise click.ClickException('--config/-c required')

    with open(config_file) as ff:
        click.echo(f'Validating {config_file}')
        instance = yaml_load(ff)
        validate_config(instance)
        click.echo('Valid configuration')


config.add_command(validate)
