from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumHttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class EnumMediaType(str, Enum):
    """Generic media types used next to the vendor-specific ones."""

    JSON = "application/json"
    ZIP = "application/zip"
    OCTET_STREAM = "application/octet-stream"
    MULTIPART_FORM_DATA = "multipart/form-data"
