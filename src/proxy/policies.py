"""Ready-made interception policies.

Policies report what happened through ReadReport / WriteReport values instead
of printing, so callers and tests can assert on the messages. Every message
is also logged at INFO.

A rejected write is not an error: the target is left as it was and the
report carries `applied=False` plus the reason.
"""

import logging
import numbers
from decimal import Decimal
from typing import Any, Callable, MutableMapping, Optional, Sequence

from pydantic import BaseModel, Field

from src.config import get_config
from src.constants import (
    CHANGE_MESSAGE,
    INVALID_NAME_MESSAGE,
    MISSING_PROPERTY_MESSAGE,
    NUMERIC_AGE_MESSAGE,
    READ_MESSAGE,
)

from .binding import InterceptionPolicy

logger = logging.getLogger(__name__)

# Returns a rejection message, or None to accept the write
Validator = Callable[[str, Any], Optional[str]]


class ReadReport(BaseModel):
    """Outcome of an intercepted read."""
    key: str = Field(..., description="Key that was read")
    value: Any = Field(default=None, description="Value found on the target, if any")
    found: bool = Field(..., description="Whether the target holds the key")
    message: str = Field(..., description="Diagnostic line for the caller")


class WriteReport(BaseModel):
    """Outcome of an intercepted write."""
    key: str = Field(..., description="Key that was written")
    value: Any = Field(default=None, description="Value the caller tried to write")
    previous: Any = Field(default=None, description="Target value before the call")
    applied: bool = Field(..., description="Whether the target was mutated")
    message: str = Field(..., description="Diagnostic line for the caller")

    @property
    def rejected(self) -> bool:
        return not self.applied


def _read(target: MutableMapping[str, Any], key: str) -> ReadReport:
    value = target.get(key)
    message = READ_MESSAGE.format(key=key, value=value)
    logger.info(message)
    return ReadReport(key=key, value=value, found=key in target, message=message)


def _apply(
    target: MutableMapping[str, Any],
    key: str,
    value: Any,
    suffix: str = "",
) -> WriteReport:
    previous = target.get(key)
    message = CHANGE_MESSAGE.format(key=key, old=previous, new=value) + suffix
    logger.info(message)
    target[key] = value
    return WriteReport(
        key=key, value=value, previous=previous, applied=True, message=message
    )


def passthrough_policy() -> InterceptionPolicy:
    """Policy with no hooks: reads and writes hit the target directly."""
    return InterceptionPolicy(name="passthrough")


def logging_policy() -> InterceptionPolicy:
    """Policy that reports every read and every write, applying all writes."""
    return InterceptionPolicy(on_get=_read, on_set=_apply, name="logging")


def validation_policy(
    validators: Sequence[Validator],
    name: str = "validation",
) -> InterceptionPolicy:
    """Build a policy that checks writes against `validators`.

    Reads of missing keys report MISSING_PROPERTY_MESSAGE. Writes run each
    validator in order; the first rejection message wins and the target is
    left untouched.

    Args:
        validators: Callables `(key, value) -> Optional[str]`.
        name: Label for logs.

    Returns:
        The configured InterceptionPolicy.
    """
    checks = list(validators)

    def on_get(target: MutableMapping[str, Any], key: str) -> ReadReport:
        if key not in target:
            logger.info(MISSING_PROPERTY_MESSAGE)
            return ReadReport(key=key, found=False, message=MISSING_PROPERTY_MESSAGE)
        return _read(target, key)

    def on_set(target: MutableMapping[str, Any], key: str, value: Any) -> WriteReport:
        for check in checks:
            reason = check(key, value)
            if reason:
                logger.info(reason)
                return WriteReport(
                    key=key,
                    value=value,
                    previous=target.get(key),
                    applied=False,
                    message=reason,
                )
        return _apply(target, key, value, suffix=".")

    return InterceptionPolicy(on_get=on_get, on_set=on_set, name=name)


def numeric_age_validator(key: str, value: Any) -> Optional[str]:
    """Reject non-numeric values for 'age'.

    Any real number (int, float, Fraction, Decimal) is accepted. Booleans
    are not numbers here.
    """
    if key != "age":
        return None
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return NUMERIC_AGE_MESSAGE
    return None


def min_length_validator(field: str, min_length: int) -> Validator:
    """Build a validator requiring `field` to be a string of at least `min_length`."""

    def validate(key: str, value: Any) -> Optional[str]:
        if key != field:
            return None
        if not isinstance(value, str) or len(value) < min_length:
            return INVALID_NAME_MESSAGE
        return None

    return validate


def person_validation_policy(min_name_length: Optional[int] = None) -> InterceptionPolicy:
    """Numeric age and minimum name length, as used by the person demo.

    Args:
        min_name_length: Overrides DemoConfig.min_name_length when given.
    """
    if min_name_length is None:
        min_name_length = get_config().min_name_length
    return validation_policy(
        [numeric_age_validator, min_length_validator("name", min_name_length)],
        name="person-validation",
    )
