"""Core application components."""

# Import in correct order to avoid circular dependencies
from core.logger import setup_logger, get_logger, get_session_logger
from core.constants import (
    TelegramLimits,
    DrawDefaults,
    DrawStatus,
    LogDefaults,
    ORDINAL_WORDS,
    TOSS_CUP_IMAGES,
)
from core.exceptions import (
    ApplicationError,
    ConfigurationError,
    ServiceError,
    TemplateRenderError,
    DrawError,
    InvalidDrawInputError,
    DrawAuthorizationError,
    DrawAlreadyRunningError,
    DrawNotStartedError,
    DrawClosedError,
    PoolExhaustedError,
)

__all__ = [
    # Initializer
    'ApplicationInitializer',
    # Logging
    'setup_logger',
    'get_logger',
    'get_session_logger',
    # Constants
    'TelegramLimits',
    'DrawDefaults',
    'DrawStatus',
    'LogDefaults',
    'ORDINAL_WORDS',
    'TOSS_CUP_IMAGES',
    # Exceptions
    'ApplicationError',
    'ConfigurationError',
    'ServiceError',
    'TemplateRenderError',
    'DrawError',
    'InvalidDrawInputError',
    'DrawAuthorizationError',
    'DrawAlreadyRunningError',
    'DrawNotStartedError',
    'DrawClosedError',
    'PoolExhaustedError',
]

# Import ApplicationInitializer last to avoid circular imports
from core.app_initializer import ApplicationInitializer
