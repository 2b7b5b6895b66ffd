#!/usr/bin/env python3
import importlib.metadata
import logging
import logging.config
import os
import sys
from argparse import ArgumentParser, FileType
from copy import deepcopy
from datetime import datetime
from importlib import import_module
from pkgutil import iter_modules
from typing import Any

import yaml

from solidweb.cli import commands
from solidweb.cli.context import WebContext
from solidweb.config import load_config
from solidweb.exceptions import ClientError, ConfigError
from solidweb.utils import DEFAULT_LOGGING_OPTIONS

logger = logging.getLogger(__name__)
now = datetime.now().strftime('%Y%m%d%H%M%S')


def load_commands(subparsers):
    # load all defined subcommands from the solidweb.cli.commands package,
    # using introspection
    command_modules = {}
    for finder, name, ispkg in iter_modules(commands.__path__):
        module = import_module(commands.__name__ + '.' + name)
        if hasattr(module, 'configure_cli'):
            module.configure_cli(subparsers)
            command_modules[name] = module
    return command_modules


def get_logging_options(config: dict[str, Any], cmd_name: str, verbose: bool = False, quiet: bool = False) -> dict:
    """Build the `logging.config.dictConfig()` options from the `LOGGING`
    section of the configuration. Only logs to a file if `LOG_DIR` is set."""
    logging_config = config.get('LOGGING', {})
    if 'LOGGING_CONFIG' in logging_config:
        with open(logging_config['LOGGING_CONFIG'], 'r') as logging_config_file:
            logging_options = yaml.safe_load(logging_config_file)
    else:
        logging_options = deepcopy(DEFAULT_LOGGING_OPTIONS)

    log_dirname = logging_config.get('LOG_DIR')
    if log_dirname:
        os.makedirs(log_dirname, exist_ok=True)
        log_filename = f'solidweb.{cmd_name}.{now}.log'
        logging_options['handlers']['file']['filename'] = os.path.join(log_dirname, log_filename)
    elif 'file' in logging_options.get('handlers', {}):
        del logging_options['handlers']['file']
        for logger_options in logging_options.get('loggers', {}).values():
            if 'file' in logger_options.get('handlers', []):
                logger_options['handlers'].remove('file')

    # manipulate console verbosity
    if 'console' in logging_options.get('handlers', {}):
        if verbose:
            logging_options['handlers']['console']['level'] = 'DEBUG'
        elif quiet:
            logging_options['handlers']['console']['level'] = 'WARNING'

    return logging_options


def main():
    """Parse args and handle options."""

    parser = ArgumentParser(
        prog='solidweb',
        description='Read and write Linked Data Platform resources on a Solid server.'
    )
    parser.set_defaults(cmd_name=None)

    parser.add_argument(
        '-c', '--config',
        help='Path to configuration file.',
        action='store',
        dest='config_file',
        type=FileType('r')
    )
    parser.add_argument(
        '-V', '--version',
        help='Print version and exit.',
        action='version',
        version=importlib.metadata.version('solidweb')
    )
    parser.add_argument(
        '-v', '--verbose',
        help='increase the verbosity of the status output',
        action='store_true'
    )
    parser.add_argument(
        '-q', '--quiet',
        help='decrease the verbosity of the status output',
        action='store_true'
    )

    subparsers = parser.add_subparsers(title='commands')

    command_modules = load_commands(subparsers)

    # parse command line args
    args = parser.parse_args()

    # if no subcommand was selected, display the help
    if args.cmd_name is None:
        parser.print_help()
        sys.exit(0)

    try:
        config = load_config(args.config_file) if args.config_file is not None else {}
    except ConfigError as e:
        print(f'Configuration error: {e}', file=sys.stderr)
        sys.exit(1)

    logging.config.dictConfig(get_logging_options(config, args.cmd_name, verbose=args.verbose, quiet=args.quiet))

    if args.config_file is not None:
        logger.debug(f'Loaded configuration from {args.config_file.name}')

    # get the selected subcommand
    command_module = command_modules[args.cmd_name]

    # dispatch to the selected subcommand
    try:
        if not hasattr(command_module, 'Command'):
            raise RuntimeError(f'Unable to execute command {args.cmd_name}')
        context = WebContext(config=config, args=args)
        command = command_module.Command(context=context)
        command(args)
    except (ClientError, ConfigError, RuntimeError) as e:
        # something failed, exit with non-zero status
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        # aborted due to Ctrl+C
        sys.exit(2)


if __name__ == "__main__":
    main()
