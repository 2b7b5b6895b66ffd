import logging
from argparse import FileType, Namespace

from solidweb.cli.commands import BaseCommand, read_data

logger = logging.getLogger(__name__)


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='replace',
        aliases=['put'],
        description='Create or replace a resource at a given URL'
    )
    parser.add_argument(
        '-t', '--type',
        help='media type of the data; defaults to "text/turtle"',
        dest='mime',
        action='store'
    )
    parser.add_argument(
        '-d', '--data',
        help='file containing the new body of the resource',
        dest='data_file',
        type=FileType('r'),
        action='store'
    )
    parser.add_argument(
        'url',
        help='URL of the resource'
    )
    parser.set_defaults(cmd_name='replace')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        self.result = self.context.client.replace(args.url, data=read_data(args), mime=args.mime)
        logger.info(f'Replaced {self.result.url}')
        print(self.result.url)
