# Compression Levels
LEVEL_NO_COMPRESSION = 0
LEVEL_FAST = 1
LEVEL_DEFAULT = 2
LEVEL_BEST = 3

# Advisories are compressed on the synchronous publish path
DEFAULT_LEVEL = LEVEL_FAST

# Zstd Native Levels Map
ZSTD_LEVEL_MAP = {
    LEVEL_NO_COMPRESSION: 0,
    LEVEL_FAST: 3,
    LEVEL_DEFAULT: 10,
    LEVEL_BEST: 19,
}

# Errors
ERROR_INVALID_LEVEL = "Invalid compression level: {level}. Must be 0-3."
ERROR_COMPRESSION_FAILED = "Zstd compression failed: {error}"
ERROR_DECOMPRESSION_FAILED = "Zstd decompression failed: {error}"
ERROR_INCOMPLETE_FRAME = "input ends before the end of the zstd frame"
