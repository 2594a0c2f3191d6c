"""
Core Protocol Interfaces

Protocols decouple the application layer from concrete persistence so
that services can be tested against in-memory fakes.
"""

from todo_cli.core.interfaces.store import TodoStoreProtocol

__all__ = ["TodoStoreProtocol"]
