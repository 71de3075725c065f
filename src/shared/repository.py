"""Lookup helpers over protean repositories.

Protean's ``repository.get`` raises ``ObjectNotFoundError``; the stores report
a missing record as the bookstore's own ``NotFound`` so that callers and the
HTTP layer see one error taxonomy.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shared.errors import NotFound


def load(aggregate_cls, identifier: str, entity: str):
    """Load an aggregate or raise NotFound."""
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError as exc:
        raise NotFound(entity, identifier) from exc


def find(aggregate_cls, identifier: str):
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        return None


def save(aggregate) -> None:
    current_domain.repository_for(type(aggregate)).add(aggregate)


def remove(aggregate) -> None:
    current_domain.repository_for(type(aggregate))._dao.delete(aggregate)


def count(aggregate_cls, **filters) -> int:
    query = current_domain.repository_for(aggregate_cls)._dao.query
    if filters:
        query = query.filter(**filters)
    return query.all().total


def list_all(aggregate_cls, **filters) -> list:
    """Every stored record matching ``filters``, past the query's default page size."""
    query = current_domain.repository_for(aggregate_cls)._dao.query
    if filters:
        query = query.filter(**filters)
    total = query.all().total
    if not total:
        return []
    return query.limit(total).all().items
