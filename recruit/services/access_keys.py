"""Access-key validation and roster resolution.

A key is redeemed in two steps: ``validate_access_key`` checks the shape
(two letters + four digits after trim/uppercase) without any network call,
then ``resolve_roster`` looks the normalized key up in the static
configuration table and slices the candidate pool.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from recruit.core.constants import (
    ACCESS_KEY_CONFIGS,
    ACCESS_KEY_PATTERN,
    MSG_INVALID_KEY_FORMAT,
)
from recruit.models.access_key import AccessKeyConfig
from recruit.models.candidate import Candidate

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(ACCESS_KEY_PATTERN, re.ASCII)


class InvalidAccessKey(ValueError):
    """The submitted string does not have the access-key shape."""

    def __init__(self, raw: str) -> None:
        super().__init__(MSG_INVALID_KEY_FORMAT)
        self.raw = raw


def load_configs(
    table: dict[str, dict[str, str | int]] | None = None,
) -> dict[str, AccessKeyConfig]:
    """Validate the raw configuration table into ``AccessKeyConfig`` entries."""
    raw = ACCESS_KEY_CONFIGS if table is None else table
    return {key: AccessKeyConfig.model_validate(entry) for key, entry in raw.items()}


_CONFIGS: dict[str, AccessKeyConfig] = load_configs()


def normalize_access_key(raw: str) -> str:
    """Trim surrounding whitespace, then uppercase."""
    return raw.strip().upper()


def is_valid_access_key(raw: str) -> bool:
    """Return True if *raw* normalizes to exactly two letters + four digits."""
    # fullmatch: ``$`` alone would also accept a trailing newline
    return _KEY_RE.fullmatch(normalize_access_key(raw)) is not None


def validate_access_key(raw: str) -> str:
    """Return the normalized key or raise ``InvalidAccessKey``."""
    if not is_valid_access_key(raw):
        logger.info("access_key_rejected", extra={"reason": "format"})
        raise InvalidAccessKey(raw)
    return normalize_access_key(raw)


@dataclass
class ResolvedRoster:
    """Candidates unlocked by a key.  Empty ``candidates`` means a miss."""
    access_key: str
    description: str | None = None
    candidates: list[Candidate] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.description is not None


def resolve_roster(
    access_key: str,
    candidates: list[Candidate],
    configs: dict[str, AccessKeyConfig] | None = None,
) -> ResolvedRoster:
    """Map *access_key* to the bounded slice of *candidates* it unlocks.

    Keeps candidates whose domain equals the configured domain, in pool
    order, truncated to the configured count.  An unknown key yields an
    empty result whether or not it is well-formed.
    """
    key = normalize_access_key(access_key)
    table = _CONFIGS if configs is None else configs
    config = table.get(key)
    if config is None:
        return ResolvedRoster(access_key=key)

    matching = [c for c in candidates if c.domain == config.domain]
    return ResolvedRoster(
        access_key=key,
        description=config.description,
        candidates=matching[: config.count],
    )
