import logging
from argparse import Namespace

from solidweb.cli.commands import BaseCommand

logger = logging.getLogger(__name__)


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='update',
        aliases=['patch'],
        description='Delete and insert individual statements in an RDF resource'
    )
    parser.add_argument(
        '--delete',
        help='statement to delete, e.g. \'<#me> <http://xmlns.com/foaf/0.1/name> "Alice" .\'; repeatable',
        dest='to_delete',
        action='append',
        default=[]
    )
    parser.add_argument(
        '--insert',
        help='statement to insert; repeatable',
        dest='to_insert',
        action='append',
        default=[]
    )
    parser.add_argument(
        'url',
        help='URL of the resource'
    )
    parser.set_defaults(cmd_name='update')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        if not args.to_delete and not args.to_insert:
            logger.warning('No statements to delete or insert; sending an empty update')
        self.result = self.context.client.update(args.url, to_delete=args.to_delete, to_insert=args.to_insert)
        logger.info(
            f'Updated {self.result.url}: {len(args.to_delete)} deleted, {len(args.to_insert)} inserted'
        )
