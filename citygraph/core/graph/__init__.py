"""Graph database client and services."""

from citygraph.core.graph.graph_service import GraphService
from citygraph.core.graph.neo4j_client import Neo4jClient

__all__ = ["Neo4jClient", "GraphService"]
