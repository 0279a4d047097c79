from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Credential:
    """Proof of an authenticated backend session for a given role.

    Holds the cookies the backend set on login; every protected call receives
    it explicitly instead of relying on a shared cookie jar.
    """

    role: Role
    cookies: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"role": self.role.value, "cookies": dict(self.cookies)}

    @classmethod
    def from_dict(cls, data: Mapping) -> "Credential":
        return cls(role=Role(data["role"]), cookies=dict(data.get("cookies") or {}))


@dataclass(frozen=True)
class Session:
    """Immutable snapshot of the login state owned by the SessionController."""

    is_logged_in: bool = False
    credential: Optional[Credential] = None

    @property
    def role(self) -> Optional[Role]:
        return self.credential.role if self.credential else None

    @classmethod
    def anonymous(cls) -> "Session":
        return cls()

    @classmethod
    def logged_in(cls, credential: Credential) -> "Session":
        return cls(is_logged_in=True, credential=credential)


@dataclass(frozen=True)
class SessionResult:
    session: Session
    message: str
    ok: bool
