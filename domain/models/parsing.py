"""
Row-to-model parsing for records returned by the data store.

A malformed row (bad date, missing column) is skipped with a warning rather
than failing the whole collection.
"""

import logging
from typing import Any, Iterable, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_records(model: Type[ModelT], rows: Iterable[Mapping[str, Any]]) -> List[ModelT]:
    """
    Validate raw rows into domain models, keeping input order.

    Args:
        model: Pydantic model class to validate each row against
        rows: Raw rows as returned by the data store

    Returns:
        Parsed models for every row that validated
    """
    records: List[ModelT] = []
    for row in rows:
        try:
            records.append(model.model_validate(row))
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            logger.warning(
                f"Skipping malformed {model.__name__} row {row.get('id')!r}: invalid {fields}"
            )
    return records
