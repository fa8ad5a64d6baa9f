"""Regular expressions and network blocks shared by the validators."""

import ipaddress

# Copied from the official Google Cloud auto-generated client.
PROJECT_REGEX = r"(?:(?:[-a-z0-9]{1,63}\.)*(?:[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?):)?(?:[0-9]{1,19}|(?:[a-z0-9](?:[-a-z0-9]{0,61}[a-z0-9])?))"
REGION_REGEX = r"[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?"
SUBNETWORK_REGEX = r"[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?"

SUBNETWORK_LINK_REGEX = (
    "projects/(" + PROJECT_REGEX + ")/regions/(" + REGION_REGEX
    + ")/subnetworks/(" + SUBNETWORK_REGEX + ")$"
)

RFC1035_NAME_TEMPLATE = r"[a-z](?:[-a-z0-9]{%d,%d}[a-z0-9])"
CLOUD_IOT_ID_REGEX = r"^[a-zA-Z][-a-zA-Z0-9._+~%]{2,254}$"
GCP_NAME_REGEX = r"^(?:[a-z](?:[-a-z0-9]{0,61}[a-z0-9])?)$"

# Service account names are 6-30 characters. The first and last characters
# are excluded from the middle bounds.
SERVICE_ACCOUNT_NAME_REGEX = RFC1035_NAME_TEMPLATE % (4, 28)

SERVICE_ACCOUNT_LINK_REGEX = (
    "projects/" + PROJECT_REGEX + "/serviceAccounts/" + SERVICE_ACCOUNT_NAME_REGEX
    + "@" + PROJECT_REGEX + r"\.iam\.gserviceaccount\.com$"
)

RESERVED_IOT_PREFIX = "goog"

RFC1918_NETWORKS = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)
