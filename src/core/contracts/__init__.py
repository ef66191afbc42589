"""
Contract Validation Module

JSON Schema validation of event and transform request payloads.
"""

from .validators import (
    ContractValidator,
    EventValidator,
    SchemaLoader,
    TransformRequestValidator,
    parse_transform_request,
    validate_event,
    validate_transform_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EventValidator",
    "TransformRequestValidator",
    # Functions
    "parse_transform_request",
    "validate_event",
    "validate_transform_request",
]
