from enum import Enum

# Literal event used by connectivity checks; short-circuits the hook.
CONNECTIVITY_TEST_EVENT = "test"

# Payload sent to functions under smoke test (a JSON string literal).
SMOKE_TEST_PAYLOAD = b'"test"'


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
