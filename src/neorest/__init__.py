"""Client for the Neo4j HTTP REST API."""

from .database import Database
from .errors import (
    BadResponse,
    FeatureUnavailable,
    InvalidDatabase,
    MalformedEntity,
    NeoRestError,
    NotFound,
    Unauthorized,
)
from .nodes import Node, NodeManager
from .relationships import Relationship, RelationshipManager

__version__ = "0.1.0"

__all__ = [
    "Database",
    "Node",
    "NodeManager",
    "Relationship",
    "RelationshipManager",
    "NeoRestError",
    "NotFound",
    "BadResponse",
    "FeatureUnavailable",
    "Unauthorized",
    "InvalidDatabase",
    "MalformedEntity",
]
