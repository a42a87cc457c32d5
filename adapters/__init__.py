"""
Adapters package - External service connections.
MongoDB, SMTP mail and upload storage.
"""

from adapters import file_storage, mail_adapter, mongo_adapter

__all__ = [
    "file_storage",
    "mail_adapter",
    "mongo_adapter",
]
