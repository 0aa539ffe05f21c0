"""Clients for the external collaborators: explorer, completion and profile services."""

from .completion import CompletionClient
from .explorer import ContractMetadataClient
from .profile import ProfileClient

__all__ = [
    "CompletionClient",
    "ContractMetadataClient",
    "ProfileClient",
]
