"""Schema management for SQL-backed providers.

Only sqlite and postgresql providers need tables created up front; the memory
provider is schemaless.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in _SQL_PROVIDERS:
            yield provider


def _register_models(domain: Domain, provider) -> None:
    """Load every persisted element so its table is registered with SQLAlchemy.

    Touching a repository's ``_dao`` forces Protean to build the model class.
    """
    registry = domain.registry
    for records in (registry.aggregates, registry.entities, registry.projections):
        for _, record in records.items():
            if record.cls.meta_.provider == provider.name:
                domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for every SQL-backed provider of the domain."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            _register_models(domain, provider)
            provider._metadata.create_all(engine)


def drop_db(domain: Domain) -> None:
    """Drop tables for every SQL-backed provider of the domain."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
