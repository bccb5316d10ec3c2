"""Settings for the LMS transformer."""
from __future__ import annotations

import os
import typing as t

from pydantic import BaseModel, ConfigDict, Field

from lms_acl.identity import DEFAULT_USER_ID_PREFIX
from lms_acl.models import EventCategory

LogLevel = t.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TransformerSettings(BaseModel):
    """
    Tunables for a Transformer.

    The library never reads the environment itself; callers that want
    env-driven settings use ``from_env``.
    """
    model_config = ConfigDict(frozen=True)

    user_id_prefix: str = DEFAULT_USER_ID_PREFIX
    # Per-category lead times that replace the NOTIFICATION_POLICY values
    advance_minutes: dict[EventCategory, int] = Field(default_factory=dict)
    log_level: LogLevel = "WARNING"

    @classmethod
    def from_env(cls, environ: t.Optional[t.Mapping[str, str]] = None) -> "TransformerSettings":
        """Build settings from ``LMS_ACL_*`` environment variables.

        :raises pydantic.ValidationError: if a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, t.Any] = {}
        if env.get("LMS_ACL_USER_ID_PREFIX") is not None:
            values["user_id_prefix"] = env["LMS_ACL_USER_ID_PREFIX"]
        if env.get("LMS_ACL_LOG_LEVEL"):
            values["log_level"] = env["LMS_ACL_LOG_LEVEL"].upper()
        return cls(**values)
