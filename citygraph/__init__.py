"""CityGraph API: paginated people and cities backed by Neo4j."""

__version__ = "0.1.0"
