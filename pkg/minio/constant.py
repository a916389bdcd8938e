# User metadata is sent and returned under this header prefix
METADATA_PREFIX = "x-amz-meta-"

# Compressed flag stored next to every object
METADATA_COMPRESSED = "x-amz-meta-compressed"
METADATA_COMPRESSED_TRUE = "true"
METADATA_COMPRESSED_FALSE = "false"

CONTENT_TYPE = "application/json"

S3_NOT_FOUND_CODES = ("NoSuchKey", "NoSuchObject", "NotFound")

DEFAULT_BUCKET = "vexination"
