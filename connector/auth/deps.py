from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from connector.auth.config import EndorsementConfig, load_endorsement_config
from connector.auth.endorsements import validate_endorsements
from connector.auth.models import Activity, EndorsedCredential

logger = logging.getLogger(__name__)


def authorize_activity(
    activity: Union[Activity, Mapping[str, Any]],
    credential: Optional[EndorsedCredential],
    cfg: Optional[EndorsementConfig] = None,
) -> bool:
    """
    Check that the channel an activity claims is endorsed by the credential it arrived with.

    The credential must already be verified upstream. `credential=None` means no
    endorsement data, which is a caller defect once a channel claim needs checking
    (InvalidArgumentError propagates).
    """
    cfg = cfg or load_endorsement_config()
    act = activity if isinstance(activity, Activity) else Activity.model_validate(dict(activity))
    endorsements = credential.endorsements if credential is not None else None

    ok = validate_endorsements(act.channel_id, endorsements, cfg.allow_unendorsed_channels)
    if not ok:
        logger.info(
            "Rejected activity %s: channel %r not endorsed (key_id=%s)",
            act.id or "-",
            act.channel_id,
            credential.key_id if credential is not None else None,
        )
    return ok
