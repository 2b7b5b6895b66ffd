from argparse import Namespace

from solidweb.cli.commands import BaseCommand, format_metadata


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='head',
        description='Show the LDP and Solid metadata of a resource'
    )
    parser.add_argument(
        'url',
        help='URL of the resource'
    )
    parser.set_defaults(cmd_name='head')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        self.result = self.context.client.head(args.url)
        print(format_metadata(self.result))
