# DEPENDENCIES
from typing import Any
from typing import Tuple
from config.settings import settings


class InvalidInputError(ValueError):
    """
    Raised when a caller passes a structurally wrong input type to the extraction engine
    """
    pass


class InputValidator:
    """
    Type-contract checks for the public extraction operations
    """
    MAX_CONTRACT_LENGTH = settings.MAX_CONTRACT_LENGTH


    @staticmethod
    def ensure_text(value: Any, operation: str) -> str:
        """
        Fail fast unless value is a string

        Arguments:
        ----------
            value     { Any } : Value passed by the caller

            operation { str } : Operation name used in the error message

        Returns:
        --------
                { str }       : The validated text
        """
        if not isinstance(value, str):
            raise InvalidInputError(f"Valid text string is required for {operation} (got {type(value).__name__})")

        return value


    @staticmethod
    def ensure_clause_sequence(value: Any) -> list:
        """
        Fail fast unless value is a list or tuple of clauses
        """
        if not isinstance(value, (list, tuple)):
            raise InvalidInputError("clauses must be a sequence")

        return list(value)


    @staticmethod
    def check_length(text: str, max_length: int = None) -> Tuple[bool, str]:
        """
        Check text length against the configured maximum

        Returns:
        --------
            { tuple } : (is_valid, message) tuple
        """
        max_length = max_length or InputValidator.MAX_CONTRACT_LENGTH

        if (len(text) > max_length):
            return (False, f"Text too long ({len(text)} chars, maximum {max_length})")

        return (True, "Text length OK")
