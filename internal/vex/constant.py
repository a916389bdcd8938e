# Caller-visible messages
MSG_MISSING_PARAMETER = "Missing valid advisory or CVE"
MSG_CVE_UNSUPPORTED = "CVE lookup is not yet supported"
MSG_NOT_FOUND = "Advisory not found"
MSG_DECODE_FAILED = "Unable to decode object"
MSG_MALFORMED_INPUT = "Unknown input format"
MSG_STORED = "VEX of size {size} stored successfully"
MSG_STORE_FAILED = "Error storing VEX: {error}"
MSG_FETCH_FAILED = "Error fetching VEX: {error}"

# Fast level keeps compression cheap on the publish path
DEFAULT_COMPRESSION_LEVEL = 1
