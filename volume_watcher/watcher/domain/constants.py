"""Constants for the volume watcher domain."""

# Server-native volume that corresponds to 100% (PA_VOLUME_NORM).
NORMAL_AMPLITUDE = 0x10000

OUTPUT_LINE_FORMAT = "volume = {percent:d} muted = {muted:d}"

DEFAULT_CLIENT_NAME = "pa-volume-watcher"

EXIT_OK = 0
EXIT_FAILURE = 1
