"""Core providers-domain exports."""

from contentform.core.providers.contentful import HttpContentfulClient
from contentform.core.providers.dry_run import DryRunContentfulClient, DryRunOperation
from contentform.core.providers.factory import create_client

__all__ = ["DryRunContentfulClient", "DryRunOperation", "HttpContentfulClient", "create_client"]
