"""
DNS resolver implementations
"""
from .dnspython import DnsPythonResolver, create_dnspython_resolver

__all__ = [
    "DnsPythonResolver",
    "create_dnspython_resolver",
]
