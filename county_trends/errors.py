"""Domain errors raised by the pipeline."""


class PipelineError(Exception):
    """Base class for pipeline failures."""

    error_code = "PIPELINE_ERROR"


class SchemaError(PipelineError, KeyError):
    """Raised when expected columns are missing from a table."""

    error_code = "SCHEMA_ERROR"

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class ParseError(PipelineError, ValueError):
    """Raised for malformed compound survey keys."""

    error_code = "PARSE_ERROR"


class FormatError(PipelineError, ValueError):
    """Raised when a county row lacks the ``county, state`` delimiter."""

    error_code = "FORMAT_ERROR"


class InputError(PipelineError, ValueError):
    """Raised for bad arguments at the pipeline boundary."""

    error_code = "INPUT_ERROR"


class ShapeError(PipelineError, ValueError):
    """Raised when a merge argument is not a (county, state) pair of tables."""

    error_code = "SHAPE_ERROR"
