"""
Channel endorsement validation.

Whoever signed the credential attached to an activity is only permitted to send
activities for specific channels. That list is the endorsement set; this module
checks the channel the activity claims against it.

Call path (upstream, not part of this package):
  token verifier -> signing key lookup -> endorsement set -> `validate_endorsements`
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from connector.auth.config import EndorsementConfig

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a caller hands the checker an argument it must never see."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} is required")


def validate_endorsements(
    channel_id: Optional[str],
    endorsements: Optional[Iterable[str]],
    allow_unendorsed_channels: bool = False,
) -> bool:
    """
    Return True if `channel_id` is one of the channels the credential is endorsed for.

    Args:
        channel_id: Channel the activity claims to arrive on (e.g. activity.channelId).
            None or "" means the activity makes no claim, which always passes.
        endorsements: Channels the credential's signer vouches for. None is a caller
            defect; an empty collection is a valid "endorsed for nothing".
        allow_unendorsed_channels: Operator bypass for channels under development that
            cannot sign yet. Disables the check entirely.

    Matching is exact and ordinal: "Slack" does not match "slack", " slack" does not
    match "slack".

    Raises:
        InvalidArgumentError: endorsements is None (or a bare string) while a claim is
            present and the bypass is off.
    """
    if not channel_id:
        logger.debug("No channel id on activity; nothing to endorse")
        return True

    if allow_unendorsed_channels:
        logger.debug("Unendorsed channels allowed; skipping endorsement check for %s", channel_id)
        return True

    if endorsements is None:
        raise InvalidArgumentError("endorsements")
    # `in` on a str is a substring test, not membership.
    if isinstance(endorsements, str):
        raise InvalidArgumentError("endorsements", "endorsements must be a collection of channel ids, not a string")

    return channel_id in endorsements


@dataclass(frozen=True)
class EndorsementPolicy:
    """Injectable wrapper around `validate_endorsements` for callers that want a capability object."""

    allow_unendorsed_channels: bool = False

    @classmethod
    def from_config(cls, cfg: "EndorsementConfig") -> "EndorsementPolicy":
        return cls(allow_unendorsed_channels=cfg.allow_unendorsed_channels)

    def validate(self, channel_id: Optional[str], endorsements: Optional[Iterable[str]]) -> bool:
        return validate_endorsements(channel_id, endorsements, self.allow_unendorsed_channels)
