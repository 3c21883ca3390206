"""All pydomainextractor exceptions"""


class DomainExtractorException(Exception):
    """Base class for all pydomainextractor exceptions"""


class RulesetError(DomainExtractorException):
    """Raised when a public suffix list could not be read, fetched, or
    written"""


class ConfigError(DomainExtractorException):
    """Raised when the configuration is malformed or has other errors"""
