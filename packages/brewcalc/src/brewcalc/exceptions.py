"""
Exception types for brewcalc.

All exceptions inherit from BrewcalcError for easy catching
of any library-related errors. I/O errors raised by the output
sink are never wrapped and propagate as ``OSError``.
"""


class BrewcalcError(Exception):
    """Base exception for all brewcalc errors."""

    pass


class UnknownVariantError(BrewcalcError, ValueError):
    """Raised when a string is not one of an enum's canonical tokens."""

    def __init__(self, type_name: str, value: str):
        self.type_name = type_name
        self.value = value
        super().__init__(f"no such variant for {type_name}: {value!r}")


class RecordKindNotImplementedError(BrewcalcError, NotImplementedError):
    """Raised when a record kind has no BeerXML writer yet."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"writing {kind} records is not implemented")


class RecordSetError(BrewcalcError):
    """Raised when a record set would hold duplicate or mixed records."""

    pass


class ConfigurationError(BrewcalcError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidCharacterError(BrewcalcError, ValueError):
    """Raised when text holds a character XML 1.0 cannot represent."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"text contains a character not allowed in XML: {text!r}")
