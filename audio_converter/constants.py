"""Project-wide constants for Audio Converter."""

VERSION = "0.3.0"

# Extensions handled by the batch command (lower-case, without dot)
SUPPORTED_EXTENSIONS = ("wav", "flac", "ogg", "aiff", "aif", "mp3", "aac", "m4a")

# Integer full-scale values used by the quantizers
INT16_FULL_SCALE = 32767.0
INT32_FULL_SCALE = 2147483647.0

DEFAULT_ARRAY_NAME = "AUDIO_SAMPLES"
DEFAULT_OUTPUT_SUFFIX = ".rs"
