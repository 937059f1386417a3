from typing import Any, Dict

from app.core.entities import EntityDescriptor
from app.services.query_router import RowSet


def render_rows(entity: EntityDescriptor, rows: RowSet) -> Dict[str, Any]:
    """View model for a row collection, keyed by the entity's collection name."""
    return {entity.collection_key: rows}
