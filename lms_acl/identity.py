"""
User identity resolution and idempotency key derivation.

Resolvers turn an opaque LMS student id into an internal user id. Only the
resolver may talk to another system, so it sits behind ``IdentityResolver``
and the caller owns its timeout and retry policy.
"""
from __future__ import annotations

import hashlib
import logging
import typing as t
import uuid

from lms_acl.errors import UnknownStudent

logger = logging.getLogger(__name__)

DEFAULT_USER_ID_PREFIX = "user-"


class IdentityResolver(t.Protocol):
    """Maps an external (LMS) identifier to an internal user id."""

    def resolve_user_id(self, external_id: str) -> str:
        """Return the internal id, or raise ``UnknownStudent``."""
        ...


class PrefixIdentityResolver:
    """Stub resolver: internal id is ``prefix + external_id``. Never fails."""

    def __init__(self, prefix: str = DEFAULT_USER_ID_PREFIX) -> None:
        self.prefix = prefix

    def resolve_user_id(self, external_id: str) -> str:
        # TODO: replace with a call to the user mapping service once it exposes a lookup API
        return f"{self.prefix}{external_id}"


class MappingIdentityResolver:
    """Resolver backed by a fixed id table."""

    def __init__(self, mapping: t.Mapping[str, str]) -> None:
        self.mapping = dict(mapping)

    def resolve_user_id(self, external_id: str) -> str:
        try:
            return self.mapping[external_id]
        except KeyError:
            logger.debug("No user mapping for LMS student %s", external_id)
            raise UnknownStudent(external_id) from None


_default_resolver = PrefixIdentityResolver()


def resolve_user_id(lms_student_id: str) -> str:
    """Resolve an LMS student id with the default stub resolver."""
    return _default_resolver.resolve_user_id(lms_student_id)


def derive_idempotency_key(natural_id: str) -> str:
    """Derive a stable idempotency key from an LMS natural identifier.

    The key is a name-based (version 3, MD5) UUID over the UTF-8 bytes of the
    id with no namespace, the same value ``java.util.UUID.nameUUIDFromBytes``
    produces. Repeated deliveries of one LMS event therefore share a key.

    :param natural_id: ``assignment_id`` or ``event_id`` of the source event.
    :return: Canonical 36-character lowercase UUID string.
    """
    digest = hashlib.md5(natural_id.encode("utf-8"), usedforsecurity=False).digest()
    return str(uuid.UUID(bytes=digest, version=3))
