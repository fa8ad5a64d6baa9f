"""Field validators for cloud resource configuration values.

Every validator takes the raw value and the field key and returns a
ValidationResult of (warnings, errors). Errors are returned, never raised,
so the schema engine can collect them for every field.
"""

import functools
import logging
import re
from typing import Any, Callable, List, NamedTuple, Optional

from .cidr import is_rfc1918, parse_cidr
from .exceptions import ConfigurationError, ValidationError
from .patterns import (
    CLOUD_IOT_ID_REGEX,
    GCP_NAME_REGEX,
    RESERVED_IOT_PREFIX,
    RFC1035_NAME_TEMPLATE,
    SERVICE_ACCOUNT_LINK_REGEX,
    SERVICE_ACCOUNT_NAME_REGEX,
    SUBNETWORK_LINK_REGEX,
)

logger = logging.getLogger(__name__)

class ValidationResult(NamedTuple):
    """Warnings and errors produced for a single value."""
    warnings: List[str]
    errors: List[Exception]

    @property
    def ok(self) -> bool:
        return not self.errors

SchemaValidateFunc = Callable[[Any, str], ValidationResult]

@functools.lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)

def _misconfigured(errors: List[ConfigurationError]) -> SchemaValidateFunc:
    """Build a validator that reports its own configuration errors."""
    for error in errors:
        logger.warning(f"Misconfigured validator: {error}")

    def validate(value: Any, key: str) -> ValidationResult:
        return ValidationResult([], list(errors))

    return validate

def validate_regexp(pattern: str, search: bool = False) -> SchemaValidateFunc:
    """
    Build a validator that accepts values fully matching a regular expression.
    The match is anchored at both ends unless search is set, in which case
    the pattern may match anywhere, so only its own anchors apply.
    """
    try:
        regex = _compile(pattern)
    except re.error as e:
        return _misconfigured([
            ConfigurationError(f"Invalid regexp {pattern!r}: {str(e)}")
        ])

    def validate(value: Any, key: str) -> ValidationResult:
        errors = []
        matched = regex.search(value) if search else regex.fullmatch(value)
        if not matched:
            logger.debug(f"Rejected {key}={value!r}: no match for {pattern}")
            errors.append(ValidationError(
                f'"{key}" ("{value}") doesn\'t match regexp "{pattern}"'
            ))
        return ValidationResult([], errors)

    return validate

def validate_gcp_name(value: Any, key: str) -> ValidationResult:
    """
    Validate a generic resource name.
    Must be 0-63 lowercase letters, digits and hyphens, starting with a letter
    and not ending with a hyphen.
    """
    return validate_regexp(GCP_NAME_REGEX)(value, key)

def validate_rfc1035_name(min_length: int, max_length: int) -> SchemaValidateFunc:
    """
    Build a validator for RFC1035 label-like names of min_length to
    max_length characters.

    The bounds are checked here, once. A misconfigured validator returns its
    ConfigurationErrors for every value it is given.
    """
    errors = []
    if min_length < 2:
        errors.append(ConfigurationError(
            f"min must be at least 2. Got: {min_length}"
        ))
    if max_length < min_length:
        errors.append(ConfigurationError(
            f"max must be greater than min. Got [{min_length}, {max_length}]"
        ))
    if errors:
        return _misconfigured(errors)

    return validate_regexp(
        "^" + RFC1035_NAME_TEMPLATE % (min_length - 2, max_length - 2) + "$"
    )

def validate_cidr_network(min_bits: int, max_bits: int) -> SchemaValidateFunc:
    """Build a validator for CIDR values with a prefix length in [min_bits, max_bits]."""
    def validate(value: Any, key: str) -> ValidationResult:
        errors = []
        try:
            _, network = parse_cidr(value)
        except ValueError as e:
            logger.debug(f"Rejected {key}={value!r}: {e}")
            errors.append(ValidationError(
                f'expected "{key}" to contain a valid CIDR, got: {value} with err: {e}'
            ))
            return ValidationResult([], errors)

        if not min_bits <= network.prefixlen <= max_bits:
            logger.debug(f"Rejected {key}={value!r}: prefix length out of range")
            errors.append(ValidationError(
                f'expected "{key}" to contain a network value with between '
                f'{min_bits} and {max_bits} significant bits, got: {network.prefixlen}'
            ))
        return ValidationResult([], errors)

    return validate

def validate_rfc1918_network(min_bits: int, max_bits: int) -> SchemaValidateFunc:
    """
    Build a validator for private CIDR ranges.

    The value must first be a CIDR with a prefix length in [min_bits, max_bits].
    If it is not, only that error is returned. Otherwise its address must lie
    inside 10.0.0.0/8, 172.16.0.0/12 or 192.168.0.0/16.
    """
    validate_network = validate_cidr_network(min_bits, max_bits)

    def validate(value: Any, key: str) -> ValidationResult:
        result = validate_network(value, key)
        if result.errors:
            return result

        address, _ = parse_cidr(value)
        if is_rfc1918(address):
            return result

        logger.debug(f"Rejected {key}={value!r}: not an RFC1918 range")
        result.errors.append(ValidationError(
            f'expected "{key}" to be an RFC1918-compliant CIDR, got: {value}'
        ))
        return result

    return validate

def _parse_uint(digits: str) -> Optional[int]:
    # ASCII digits only; int() would also take signs, spaces and underscores.
    if digits.isascii() and digits.isdigit():
        return int(digits)
    return None

def validate_rfc3339_time(value: Any, key: str) -> ValidationResult:
    """Validate a time of day in HH:mm format. Only the first failure is reported."""
    errors = []
    if len(value) != 5 or value[2] != ":":
        logger.debug(f"Rejected {key}={value!r}: not in HH:mm format")
        errors.append(ValidationError(
            f'"{key}" ("{value}") must be in the format HH:mm (RFC3339)'
        ))
        return ValidationResult([], errors)

    hour = _parse_uint(value[:2])
    if hour is None or hour > 23:
        logger.debug(f"Rejected {key}={value!r}: invalid hour")
        errors.append(ValidationError(
            f'"{key}" ("{value}") does not contain a valid hour (00-23)'
        ))
        return ValidationResult([], errors)

    minute = _parse_uint(value[3:])
    if minute is None or minute > 59:
        logger.debug(f"Rejected {key}={value!r}: invalid minute")
        errors.append(ValidationError(
            f'"{key}" ("{value}") does not contain a valid minute (00-59)'
        ))
    return ValidationResult([], errors)

def validate_ip_cidr_range(value: Any, key: str) -> ValidationResult:
    """Validate CIDR notation."""
    errors = []
    try:
        parse_cidr(value)
    except ValueError as e:
        logger.debug(f"Rejected {key}={value!r}: {e}")
        errors.append(ValidationError(
            f'"{key}" is not a valid IP CIDR range: {str(e)}'
        ))
    return ValidationResult([], errors)

def validate_cloud_iot_id(value: Any, key: str) -> ValidationResult:
    """
    Validate a Cloud IoT registry or device id.
    The reserved prefix and the id format are checked independently, so a
    value can fail both.
    """
    errors = []
    if value.startswith(RESERVED_IOT_PREFIX):
        logger.debug(f"Rejected {key}={value!r}: reserved prefix {RESERVED_IOT_PREFIX}")
        errors.append(ValidationError(
            f'"{key}" ("{value}") can not start with "{RESERVED_IOT_PREFIX}"'
        ))
    errors.extend(validate_regexp(CLOUD_IOT_ID_REGEX)(value, key).errors)
    return ValidationResult([], errors)

validate_service_account_name = validate_regexp("^" + SERVICE_ACCOUNT_NAME_REGEX + "$")
# Links may be full API URLs, so only the trailing anchor applies.
validate_service_account_link = validate_regexp(SERVICE_ACCOUNT_LINK_REGEX, search=True)
validate_subnetwork_link = validate_regexp(SUBNETWORK_LINK_REGEX, search=True)
