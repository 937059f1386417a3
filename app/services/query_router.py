import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import ConnectionManager
from app.core.entities import PATIENTS, PROVIDERS, EntityDescriptor
from app.services.filter_resolver import FilterResolver

logger = logging.getLogger(__name__)

RowSet = List[Dict[str, Any]]


class QueryExecutionError(Exception):
    """A directory query could not be executed; ``cause`` holds the driver error."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class QueryRouter:
    def __init__(self, connection_manager: ConnectionManager, resolver: Optional[FilterResolver] = None):
        self.connection_manager = connection_manager
        self.resolver = resolver or FilterResolver()

    def list_entity(
        self,
        entity: EntityDescriptor,
        filter_value: Optional[str] = None,
        filtered: bool = False,
    ) -> RowSet:
        """Run the unfiltered or filtered query for ``entity`` and return all rows."""
        if filtered:
            query = self.resolver.resolve(entity, filter_value)
            if query is None:
                return []
        else:
            query = self.resolver.unfiltered_query(entity)

        if not self.connection_manager.ensure_connected():
            error = self.connection_manager.last_error
            logger.error("Error querying %s: database is unavailable: %s", entity.table, error)
            raise QueryExecutionError(f"Database unavailable while querying {entity.table}", cause=error) from error

        try:
            return self.connection_manager.execute(query.statement, query.params)
        except SQLAlchemyError as e:
            logger.error("Error querying %s: %s", entity.table, e, exc_info=True)
            raise QueryExecutionError(f"Failed to query {entity.table}", cause=e) from e

    def list_patients(self) -> RowSet:
        return self.list_entity(PATIENTS)

    def filter_patients_by_first_name(self, value: Optional[str]) -> RowSet:
        return self.list_entity(PATIENTS, value, filtered=True)

    def list_providers(self) -> RowSet:
        return self.list_entity(PROVIDERS)

    def filter_providers_by_specialty(self, value: Optional[str]) -> RowSet:
        return self.list_entity(PROVIDERS, value, filtered=True)
