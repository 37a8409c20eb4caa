from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Activity(BaseModel):
    """The inbound activity fields the endorsement check reads. Everything else is ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    type: Optional[str] = None
    channel_id: Optional[str] = Field(default=None, alias="channelId")

    @field_validator("channel_id", mode="before")
    @classmethod
    def _channel_id_str(cls, v: Any) -> Optional[str]:
        # No trimming or case folding; ids are compared verbatim.
        if v is None:
            return None
        return v if isinstance(v, str) else str(v)


@dataclass(frozen=True)
class EndorsedCredential:
    """Output of the upstream token verifier: a verified credential and the channels it is endorsed for."""

    endorsements: Optional[FrozenSet[str]]  # None: verifier found no endorsement data
    key_id: Optional[str] = None
    issuer: Optional[str] = None

    @classmethod
    def from_endorsements(
        cls,
        endorsements: Optional[Iterable[str]],
        *,
        key_id: Optional[str] = None,
        issuer: Optional[str] = None,
    ) -> "EndorsedCredential":
        if endorsements is None:
            return cls(endorsements=None, key_id=key_id, issuer=issuer)
        if isinstance(endorsements, str):
            # A single endorsement, not a set of characters.
            return cls(endorsements=frozenset([endorsements]), key_id=key_id, issuer=issuer)
        return cls(endorsements=frozenset(endorsements), key_id=key_id, issuer=issuer)
