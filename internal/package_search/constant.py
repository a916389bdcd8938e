# Prefix used by qualified-only marker terms, e.g. "is:container"
MARKER_QUALIFIER = "is"
FIELD_SEPARATOR = ":"

# Field names as they appear in queries
FIELD_DEPENDENT = "dependent"
FIELD_PURL = "purl"
FIELD_TYPE = "type"
FIELD_NAMESPACE = "namespace"
FIELD_NAME = "name"
FIELD_VERSION = "version"
FIELD_DESCRIPTION = "description"
FIELD_DIGEST = "digest"
FIELD_LICENSE = "license"
FIELD_QUALIFIER = "qualifier"

FIELD_APPLICATION = "application"
FIELD_LIBRARY = "library"
FIELD_FRAMEWORK = "framework"
FIELD_CONTAINER = "container"
FIELD_OPERATING_SYSTEM = "operating_system"
FIELD_DEVICE = "device"
FIELD_FIRMWARE = "firmware"
FIELD_FILE = "file"

ERROR_UNKNOWN_FIELD = "Unknown package search field: {name}"
ERROR_VALUE_REQUIRED = "Field '{name}' requires a value"
ERROR_VALUE_NOT_ALLOWED = "Field '{name}' is a marker and takes no value"
