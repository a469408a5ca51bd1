"""
Permission scopes

To write data on behalf of a user or to access their private data, an application must
request additional permission scopes from them during authorization. The "public" scope
is the default and is always requested.

See https://unsplash.com/documentation/user-authentication-workflow#permission-scopes
"""

from collections.abc import Iterable

PUBLIC = "public"  # read public data
READ_USER = "read_user"  # access user's private data
WRITE_USER = "write_user"  # update the user's profile
READ_PHOTOS = "read_photos"
WRITE_PHOTOS = "write_photos"
WRITE_LIKES = "write_likes"  # like or unlike a photo
WRITE_FOLLOWERS = "write_followers"
READ_COLLECTIONS = "read_collections"
WRITE_COLLECTIONS = "write_collections"

ALL_SCOPES = (
    PUBLIC,
    READ_USER,
    WRITE_USER,
    READ_PHOTOS,
    WRITE_PHOTOS,
    WRITE_LIKES,
    WRITE_FOLLOWERS,
    READ_COLLECTIONS,
    WRITE_COLLECTIONS,
)


class AuthScopes:
    """
    Ordered, immutable set of scope strings granted to a client. "public" is always the
    first element. Membership is an exact string match.

    AuthScopes is fixed when a Client is constructed and never changes afterward, so
    checking a scope and then issuing the request cannot race.
    """

    __slots__ = ("_scopes",)

    def __init__(self, *scopes: str):
        ordered = [PUBLIC]
        for scope in scopes:
            if scope not in ordered:
                ordered.append(scope)
        object.__setattr__(self, "_scopes", tuple(ordered))

    @classmethod
    def from_iterable(cls, scopes: Iterable[str] = ()) -> "AuthScopes":
        if isinstance(scopes, AuthScopes):
            return scopes
        return cls(*scopes)

    def __setattr__(self, name, value):
        raise AttributeError("AuthScopes is immutable")

    def __contains__(self, scope) -> bool:
        return scope in self._scopes

    def __iter__(self):
        return iter(self._scopes)

    def __len__(self) -> int:
        return len(self._scopes)

    def __eq__(self, other) -> bool:
        if isinstance(other, AuthScopes):
            return self._scopes == other._scopes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._scopes)

    def __str__(self) -> str:
        return "+".join(self._scopes)

    def __repr__(self) -> str:
        return f"AuthScopes{self._scopes!r}"

    def as_param(self) -> str:
        """Space separated form expected by the authorize endpoint."""

        return " ".join(self._scopes)
