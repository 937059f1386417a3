from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from app.core import config
from app.core.config import MissingFilterPolicy
from app.core.entities import EntityDescriptor, FilterSpec


@dataclass(frozen=True)
class ResolvedQuery:
    """Query text plus the parameters bound to it at execution time."""

    text: str
    params: Dict[str, Any] = field(default_factory=dict)

    @property
    def statement(self) -> TextClause:
        return text(self.text)


class FilterResolver:
    """Builds parameterized SELECTs for an entity.

    Only identifiers from the entity descriptor ever reach the query text;
    caller supplied values always travel in ``params`` as bound parameters.
    """

    def __init__(self, missing_filter_policy: MissingFilterPolicy = config.MISSING_FILTER_POLICY):
        self.missing_filter_policy = MissingFilterPolicy(missing_filter_policy)

    @staticmethod
    def _select(entity: EntityDescriptor) -> str:
        return f"SELECT {', '.join(entity.fields)} FROM {entity.table}"

    def unfiltered_query(self, entity: EntityDescriptor) -> ResolvedQuery:
        return ResolvedQuery(self._select(entity))

    def filtered_query(self, entity: EntityDescriptor, field_value: Optional[str]) -> ResolvedQuery:
        spec = FilterSpec(entity=entity, field=entity.filter_field, value=field_value)
        return ResolvedQuery(
            f"{self._select(entity)} WHERE {spec.field} = :{spec.field}",
            {spec.field: spec.value},
        )

    def resolve(self, entity: EntityDescriptor, field_value: Optional[str]) -> Optional[ResolvedQuery]:
        """Resolve a filter request, applying the missing-filter policy.

        Returns ``None`` when the request should yield no rows without
        touching the store. An empty string counts as a supplied value.
        """
        if field_value is not None:
            return self.filtered_query(entity, field_value)
        if self.missing_filter_policy == MissingFilterPolicy.EMPTY:
            return None
        return self.unfiltered_query(entity)
