"""Field validators package initialization."""

from .exceptions import (
    FieldValidatorError,
    ValidationError,
    ConfigurationError
)

from .cidr import (
    parse_cidr,
    is_rfc1918
)

from .validation import (
    ValidationResult,
    SchemaValidateFunc,
    validate_regexp,
    validate_gcp_name,
    validate_rfc1035_name,
    validate_cidr_network,
    validate_rfc1918_network,
    validate_rfc3339_time,
    validate_ip_cidr_range,
    validate_cloud_iot_id,
    validate_service_account_name,
    validate_service_account_link,
    validate_subnetwork_link
)

__version__ = '0.1.0'
__all__ = [
    'FieldValidatorError',
    'ValidationError',
    'ConfigurationError',
    'parse_cidr',
    'is_rfc1918',
    'ValidationResult',
    'SchemaValidateFunc',
    'validate_regexp',
    'validate_gcp_name',
    'validate_rfc1035_name',
    'validate_cidr_network',
    'validate_rfc1918_network',
    'validate_rfc3339_time',
    'validate_ip_cidr_range',
    'validate_cloud_iot_id',
    'validate_service_account_name',
    'validate_service_account_link',
    'validate_subnetwork_link'
]
