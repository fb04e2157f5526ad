"""
Schema Validation for single elements

This module provides JSON schema-based validation of collection elements. A
SchemaValidator holds one JSON schema and acts as an element rule set: it can be
attached to a collection validator with element_validation(), or used alone.

Mapping elements are validated as they are. Other objects are validated through
their ``__dict__``, so dataclass and plain object instances work as well.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ...core import constants
from ...core.results import ValidationFailure, ValidationResults


class SchemaValidator:
    """
    JSON Schema-based rule set for single elements.

    Attributes:
        schema (Dict[str, Any]): JSON schema definition
        error_message (Optional[str]): Custom message replacing the schema error text
    """

    def __init__(self, schema: Dict[str, Any], error_message: Optional[str] = None):
        """
        Initialize a schema validator.

        Args:
            schema: JSON schema definition as a dictionary
            error_message: Custom message reported instead of the jsonschema error

        Example:
            >>> validator = SchemaValidator({
            ...     "type": "object",
            ...     "properties": {"name": {"type": "string"}},
            ...     "required": ["name"],
            ... })
            >>> validator.validate({"name": "service_a"}).is_valid
            True
        """
        self.schema = schema
        self.error_message = error_message

    @staticmethod
    def _instance_data(instance: Any) -> Any:
        if isinstance(instance, Mapping):
            return dict(instance)
        if hasattr(instance, "__dict__"):
            return vars(instance)
        return instance

    def failures_for(self, instance: Any) -> List[ValidationFailure]:
        """
        Validate an instance and report schema errors as failures.

        jsonschema reports the first error it finds, so at most one failure is
        produced per instance.
        """
        try:
            json_validate(instance=self._instance_data(instance), schema=self.schema)
        except JsonSchemaError as e:
            path = ".".join(str(part) for part in e.absolute_path) or None
            message = self.error_message or constants.SCHEMA_MESSAGE.format(reason=e.message)
            return [
                ValidationFailure(
                    message,
                    rule=constants.RuleKind.ELEMENT.value,
                    property_name=path,
                    attempted_value=e.instance,
                )
            ]
        return []

    def validate(self, instance: Any) -> ValidationResults:
        """Validate one instance against the schema."""
        return ValidationResults(self.failures_for(instance))
