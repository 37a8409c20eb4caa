"""
Channel endorsement checks for inbound activities.

Design goals:
- One pure decision rule (`validate_endorsements`); no I/O, no state.
- Token parsing and signature verification stay upstream.
- The unendorsed-channel bypass is operator configuration, never a default.
"""
from __future__ import annotations

from connector.auth.endorsements import EndorsementPolicy, InvalidArgumentError, validate_endorsements

__all__ = ["EndorsementPolicy", "InvalidArgumentError", "validate_endorsements"]
