"""Proxy pattern: mediated reads and writes over a target mapping."""

from .binding import InterceptionPolicy, ProxyBinding, wrap
from .policies import (
    ReadReport,
    WriteReport,
    logging_policy,
    min_length_validator,
    numeric_age_validator,
    passthrough_policy,
    person_validation_policy,
    validation_policy,
)

__all__ = [
    "InterceptionPolicy",
    "ProxyBinding",
    "wrap",
    "ReadReport",
    "WriteReport",
    "logging_policy",
    "min_length_validator",
    "numeric_age_validator",
    "passthrough_policy",
    "person_validation_policy",
    "validation_policy",
]
