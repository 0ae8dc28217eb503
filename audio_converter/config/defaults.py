"""Default transform and output settings for Audio Converter."""

from audio_converter.constants import DEFAULT_ARRAY_NAME

# Mirrors the model defaults; kept as plain data so the generator can dump it
TRANSFORM: dict = {
    "gain_db": 0.0,
    "target_sample_rate": None,
    "target_channel_count": None,
    "normalize": False,
    "output_format": "f32",
    "channel_aware_resampling": False,
}

OUTPUT: dict = {
    "array_name": DEFAULT_ARRAY_NAME,
    "include_metadata": True,
    "precision": 6,
}
