"""Directory registry — singleton access to the user and resource directories.

In-memory directories are used by default; HTTP-backed clients for the
auth and resources services plug in behind the same ports.
"""

from notifier.recipient.fake_directory import InMemoryResourceDirectory, InMemoryUserDirectory
from notifier.recipient.resolver import RecipientResolver

_user_directory: InMemoryUserDirectory | None = None
_resource_directory: InMemoryResourceDirectory | None = None


def get_user_directory():
    global _user_directory
    if _user_directory is None:
        _user_directory = InMemoryUserDirectory()
    return _user_directory


def get_resource_directory():
    global _resource_directory
    if _resource_directory is None:
        _resource_directory = InMemoryResourceDirectory()
    return _resource_directory


def get_resolver() -> RecipientResolver:
    return RecipientResolver(get_user_directory(), get_resource_directory())


def reset_directories():
    """Reset directory singletons (useful for testing)."""
    global _user_directory, _resource_directory
    _user_directory = None
    _resource_directory = None
