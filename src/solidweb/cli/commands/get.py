from argparse import Namespace

from solidweb.cli.commands import BaseCommand


def configure_cli(subparsers):
    parser = subparsers.add_parser(
        name='get',
        description='Retrieve an RDF resource and print it'
    )
    parser.add_argument(
        '-f', '--format',
        help='RDF serialization format to print; defaults to "turtle"',
        action='store',
        default='turtle'
    )
    parser.add_argument(
        'url',
        help='URL of the resource'
    )
    parser.set_defaults(cmd_name='get')


class Command(BaseCommand):
    def __call__(self, args: Namespace):
        self.result = self.context.client.get(args.url)
        print(self.result.serialize(format=args.format))
