"""Sample transformation exceptions for Audio Converter."""

from audio_converter.exceptions.base import ConverterError


class TransformError(ConverterError):
    """Base class for failures inside the sample transformation pipeline.

    Stages are pure and deterministic, so re-running with the same input
    always reproduces the same error.
    """


class DegenerateParameterError(TransformError):
    """Raised when a stage parameter makes the computation undefined."""

    def __init__(self, parameter: str, value: int | float) -> None:
        super().__init__(f"Degenerate parameter {parameter}={value}")
        self.parameter = parameter
        self.value = value


class NonFiniteSampleError(TransformError):
    """Raised when the buffer contains NaN or infinite samples."""

    def __init__(self, stage: str, count: int) -> None:
        super().__init__(f"{count} non-finite sample(s) after {stage} stage")
        self.stage = stage
        self.count = count
