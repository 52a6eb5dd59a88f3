"""
Filter-matching rules shared by every store.

An empty filter argument matches any value for its field. Exact-match
lookups (by DN, or an auth method's service/host/type) use plain equality.
"""

from typing import Callable, Iterable, List, TypeVar

from pydantic import BaseModel

from ..schemas import BaseAuthMethod, Binding, Service

T = TypeVar("T", bound=BaseModel)


def field_matches(wanted: str, actual: str) -> bool:
    """True when ``wanted`` is empty or equal to ``actual``."""
    return not wanted or wanted == actual


def service_matches(service: Service, name: str) -> bool:
    return field_matches(name, service.name)


def binding_matches(binding: Binding, service: str, host: str) -> bool:
    """Service and host filters applied independently; empty means any."""
    return field_matches(service, binding.service) and field_matches(host, binding.host)


def binding_matches_dn(binding: Binding, dn: str, host: str) -> bool:
    return binding.dn == dn and binding.host == host


def auth_method_matches(auth_method: BaseAuthMethod, service: str, host: str, auth_type: str) -> bool:
    return auth_method.matches(service, host, auth_type)


def select_copies(records: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """
    Matching records, in collection order, as independent deep copies.

    Args:
        records: Collection to scan
        predicate: Filter applied to each record

    Returns:
        New list of copies; empty when nothing matches
    """
    return [record.model_copy(deep=True) for record in records if predicate(record)]
