"""
Deterministic seed data for the in-memory store.

Each function builds new objects on every call so a reseeded store never
shares state with an earlier session.
"""

from typing import List

from ..schemas import ApiKeyAuth, BaseAuthMethod, Binding, Service

SEED_TIMESTAMP = "2018-05-05T15:04:05Z"


def seed_services() -> List[Service]:
    return [
        Service(
            name="s1",
            hosts=["host1", "host2", "host3"],
            auth_types=["x509, oidc"],
            auth_method="api-key",
            retrieval_field="token",
        ),
        Service(
            name="s2",
            hosts=["host3", "host4"],
            auth_types=["x509"],
            auth_method="api-key",
            retrieval_field="user_token",
        ),
    ]


def seed_bindings() -> List[Binding]:
    return [
        Binding(
            name=name,
            service=service,
            host=host,
            dn=dn,
            oidc_token="",
            unique_key=unique_key,
            created_on=SEED_TIMESTAMP,
            last_auth="",
        )
        for name, service, host, dn, unique_key in [
            ("b1", "s1", "host1", "test_dn_1", "unique_key_1"),
            ("b2", "s1", "host1", "test_dn_2", "unique_key_2"),
            ("b3", "s2", "host2", "test_dn_3", "unique_key_3"),
        ]
    ]


def seed_auth_methods() -> List[BaseAuthMethod]:
    return [
        ApiKeyAuth(
            service="s1",
            host="host1",
            path="test_path_1",
            port=9000,
            access_key="key1",
        ),
    ]
