"""Type validation shared by the purchase flow and its gateways."""

from typing import Any


class TypeValidators:
    """Structural checks that raise TypeError, never a domain error."""

    @staticmethod
    def is_integer(value: Any) -> bool:
        # bool is an int subclass but never a valid count or id
        return isinstance(value, int) and not isinstance(value, bool)

    @staticmethod
    def validate_integer(value: Any, field_name: str) -> None:
        if not TypeValidators.is_integer(value):
            raise TypeError(f'{field_name} must be an integer')

    @staticmethod
    def validate_integer_attribute(_instance: Any, attribute: Any, value: Any) -> None:
        """Validate that an attribute holds an integer (for attrs validators)."""
        TypeValidators.validate_integer(value, attribute.alias)
