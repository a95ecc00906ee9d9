from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_BINDING_POLICY = 'value'
_DEFAULT_CONS_POLICY = 'eager'
_DEFAULT_RECURSION_LIMIT = 10000

BINDING_POLICY_NAMES = ('value', 'name', 'need')
CONS_POLICY_NAMES = ('eager', 'name', 'need')


def choice_from_env(var: str, default: str, choices: tuple[str, ...]) -> str:
    raw = os.environ.get(var)
    if not raw:
        return default
    value = raw.strip().lower()
    if value not in choices:
        raise ValueError(f"{var} must be one of {', '.join(choices)}; got {raw!r}")
    return value


def get_binding_policy_name() -> str:
    return choice_from_env('JAM_BINDING_POLICY', _DEFAULT_BINDING_POLICY, BINDING_POLICY_NAMES)


def get_cons_policy_name() -> str:
    return choice_from_env('JAM_CONS_POLICY', _DEFAULT_CONS_POLICY, CONS_POLICY_NAMES)


def get_recursion_limit() -> int:
    raw = os.environ.get('JAM_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"JAM_RECURSION_LIMIT must be an integer; got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"JAM_RECURSION_LIMIT must be positive; got {limit}")
    logger.debug("recursion limit from environment: %d", limit)
    return limit
