"""
Toolkit configuration: target network, logging and policy-ID overrides.

- Loads sane defaults and supports overrides via environment variables (ANDAMIO_*).
- The hashing core never reads configuration; only the CLI and applications do.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from .constants.cardano import ensure_network
from .constants.policies import POLICY_IDS, POLICY_ROLES, NetworkPolicies, is_valid_policy_id
from .errors import ConfigError

_DEFAULT_NETWORK = "preprod"
_DEFAULT_LOG_LEVEL = "INFO"
_LOG_FORMATS = ("json", "text")


def _env(environ: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    v = environ.get(name)
    return v if v not in (None, "") else default


def _parse_log_format(val: Optional[str]) -> Optional[str]:
    if val is None:
        return None
    s = val.strip().lower()
    if s not in _LOG_FORMATS:
        raise ConfigError(f"log format must be one of {_LOG_FORMATS}, got {val!r}", log_format=val)
    return s


def _validate_overrides(overrides: Mapping[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for role, policy_id in overrides.items():
        if role not in POLICY_ROLES:
            raise ConfigError(f"unknown policy role {role!r}", role=role)
        if not is_valid_policy_id(policy_id):
            raise ConfigError(
                f"policy ID for {role} must be 56 hex characters", role=role, value=policy_id
            )
        out[role] = policy_id.lower()
    return out


@dataclass(slots=True)
class CoreConfig:
    network: str = _DEFAULT_NETWORK
    log_level: str = _DEFAULT_LOG_LEVEL
    # None -> decided by TTY detection at configure() time
    log_format: Optional[str] = None
    # policy role (e.g. "course_token") -> 56-hex policy ID
    policy_overrides: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.network = ensure_network(self.network)
        self.log_format = _parse_log_format(self.log_format)
        self.policy_overrides = _validate_overrides(self.policy_overrides)

    @classmethod
    def from_env(
        cls, prefix: str = "ANDAMIO_", environ: Optional[Mapping[str, str]] = None
    ) -> "CoreConfig":
        """
        Create config from environment variables:

        ANDAMIO_NETWORK                 (mainnet | preprod | preview)
        ANDAMIO_LOG_LEVEL               (DEBUG | INFO | WARNING | ...)
        ANDAMIO_LOG_FORMAT              (json | text) optional
        ANDAMIO_POLICY_<ROLE>           e.g. ANDAMIO_POLICY_COURSE_TOKEN
        """
        env = os.environ if environ is None else environ
        overrides: Dict[str, str] = {}
        for role in POLICY_ROLES:
            v = _env(env, f"{prefix}POLICY_{role.upper()}")
            if v is not None:
                overrides[role] = v.strip()

        return cls(
            network=_env(env, f"{prefix}NETWORK", _DEFAULT_NETWORK) or _DEFAULT_NETWORK,
            log_level=(_env(env, f"{prefix}LOG_LEVEL", _DEFAULT_LOG_LEVEL) or _DEFAULT_LOG_LEVEL).upper(),
            log_format=_env(env, f"{prefix}LOG_FORMAT"),
            policy_overrides=overrides,
        )

    @classmethod
    def with_overrides(
        cls, base: Optional["CoreConfig"] = None, **overrides: Any
    ) -> "CoreConfig":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys and None values are ignored.
        """
        base = base or cls.from_env()
        data = {k: v for k, v in overrides.items() if k in base.to_dict() and v is not None}
        return replace(base, **data)

    def policies(self) -> NetworkPolicies:
        """Static policy table for `network` with the configured overrides applied."""
        return replace(POLICY_IDS[self.network], **self.policy_overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "network": self.network,
            "log_level": self.log_level,
            "log_format": self.log_format,
            "policy_overrides": dict(self.policy_overrides),
        }


__all__ = ["CoreConfig"]
