from argparse import Namespace
from typing import Optional

from solidweb.cli.context import WebContext
from solidweb.metadata import ResourceMetadata


class BaseCommand:
    def __init__(self, context: WebContext = None):
        self.context = context
        self.result = None

    def __call__(self, args: Namespace):
        raise NotImplementedError


def read_data(args: Namespace) -> Optional[str]:
    """Contents of the `--data` file argument, if one was given."""
    if getattr(args, 'data_file', None) is None:
        return None
    with args.data_file as data_file:
        return data_file.read()


def format_metadata(metadata: ResourceMetadata) -> str:
    fields = [
        ('url', metadata.url),
        ('status', metadata.status_code),
        ('exists', metadata.exists),
        ('acl', metadata.acl_link or ''),
        ('meta', metadata.meta_link or ''),
        ('user', metadata.user),
        ('updates-via', metadata.websocket_endpoint),
        ('editable', ', '.join(sorted(metadata.editable_via))),
    ]
    return '\n'.join(f'{name}: {value}' for name, value in fields)
