import json
from logging import getLogger
from os import environ, path

from .errors import ConfigNotFound, MissingToken

logger = getLogger(__name__)
TOKEN_VARIABLE = 'DISCORD_TOKEN'


def load_config(config_file_path='config.json', env=None):
    """
    Load the bot configuration from a JSON file.

    The token may be supplied through the ``DISCORD_TOKEN`` environment variable,
    which takes precedence over the ``token`` key of the file.

    Args:
        config_file_path (str): Path of the JSON config file.
        env (typing.Mapping[str, str]): Environment to read overrides from.
        Defaults to :data:`os.environ`.

    Returns:
        dict: Parsed configuration.

    Raises:
        slimebot.errors.ConfigNotFound: The given path does not point to a file.
        slimebot.errors.MissingToken: Neither the file nor the environment provide a token.
    """
    if env is None:
        env = environ

    if not path.isfile(config_file_path):
        raise ConfigNotFound(config_file_path)

    with open(config_file_path) as config_file:
        config = json.load(config_file)

    if env.get(TOKEN_VARIABLE):
        logger.debug(f'Using token from environment variable {TOKEN_VARIABLE}.')
        config['token'] = env[TOKEN_VARIABLE]

    if not config.get('token'):
        raise MissingToken()

    config.setdefault('cmd_prefix', '!')
    config.setdefault('default_game', None)
    db = config.setdefault('db', {})
    db.setdefault('options', {})

    return config
