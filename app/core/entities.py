"""
Declarative descriptions of the read-only entities the directory exposes.

Each descriptor names the backing table, the projected columns, the single
column callers may filter on and the key the rows are returned under.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from app.models.patient_model import Patient
from app.models.provider_model import Provider


class InvalidFilterError(ValueError):
    pass


@dataclass(frozen=True)
class EntityDescriptor:
    name: str
    table: str
    fields: Tuple[str, ...]
    filter_field: str
    collection_key: str

    def __post_init__(self):
        if self.filter_field not in self.fields:
            raise InvalidFilterError(
                f"Filter field '{self.filter_field}' is not projected by entity '{self.name}'"
            )


@dataclass(frozen=True)
class FilterSpec:
    entity: EntityDescriptor
    field: str
    value: Optional[str]

    def __post_init__(self):
        if self.field != self.entity.filter_field:
            raise InvalidFilterError(
                f"Entity '{self.entity.name}' can only be filtered by '{self.entity.filter_field}', not '{self.field}'"
            )


def _projected(model, *names: str) -> Tuple[str, ...]:
    missing = [n for n in names if n not in model.__table__.columns]
    if missing:
        raise InvalidFilterError(f"{model.__name__} has no column(s): {', '.join(missing)}")
    return names


PATIENTS = EntityDescriptor(
    name="patient",
    table=Patient.__tablename__,
    fields=_projected(Patient, "patient_id", "first_name", "last_name", "date_of_birth"),
    filter_field="first_name",
    collection_key="patients",
)

PROVIDERS = EntityDescriptor(
    name="provider",
    table=Provider.__tablename__,
    fields=_projected(Provider, "first_name", "last_name", "provider_specialty"),
    filter_field="provider_specialty",
    collection_key="providers",
)
