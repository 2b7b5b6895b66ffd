import logging
from argparse import Namespace

from solidweb.cli.commands import BaseCommand

logger = logging.getLogger(__name__)


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='delete',
        aliases=['del', 'rm'],
        description='Delete a resource'
    )
    parser.add_argument(
        'url',
        help='URL of the resource'
    )
    parser.set_defaults(cmd_name='delete')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        self.result = self.context.client.delete(args.url)
        logger.info(f'Deleted {args.url}')
