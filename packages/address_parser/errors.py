class AddressParserError(Exception):
    """Base error for the address parser."""


class ReferenceDataError(AddressParserError):
    """Raised when reference data is missing or malformed."""
