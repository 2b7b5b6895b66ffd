import logging
from argparse import FileType, Namespace

from solidweb.cli.commands import BaseCommand, read_data

logger = logging.getLogger(__name__)


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='create',
        aliases=['post'],
        description='Create a new resource in a container'
    )
    parser.add_argument(
        '-s', '--slug',
        help='suggested name for the new resource',
        action='store'
    )
    parser.add_argument(
        '--container',
        help='create a basic container instead of a resource',
        dest='is_container',
        action='store_true'
    )
    parser.add_argument(
        '-t', '--type',
        help='media type of the data; defaults to "text/turtle"',
        dest='mime',
        action='store'
    )
    parser.add_argument(
        '-d', '--data',
        help='file containing the body of the new resource',
        dest='data_file',
        type=FileType('r'),
        action='store'
    )
    parser.add_argument(
        'url',
        help='URL of the parent container'
    )
    parser.set_defaults(cmd_name='create')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        self.result = self.context.client.create(
            args.url,
            data=read_data(args),
            slug=args.slug,
            is_container=args.is_container,
            mime=args.mime,
        )
        logger.info(f'Created {self.result.url}')
        print(self.result.url)
