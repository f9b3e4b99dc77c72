from .result import Mirror, Success, Failure, Outcome
from .mirrorable import Mirrorable
from .failure import (
    FAILURE_TYPES,
    FailureLevel,
    DomainFailure,
    ServerFailure,
    UnauthorizedFailure,
    ForbiddenFailure,
    NotFoundFailure,
    LocalFailure,
    CacheFailure,
    NetworkFailure,
    TimeoutFailure,
    FormatFailure,
    ValidationFailure,
    UnknownFailure,
    ConflictFailure,
    BadRequestFailure,
    ExpectedFailure,
    PermissionFailure,
    PaymentFailure,
    DeviceFailure,
)
from .catalog import Catalog, CatalogConfig, FailureOverride, find_config
from .version import __version__

__all__ = [
    "Mirror", "Success", "Failure", "Outcome", "Mirrorable",
    "FAILURE_TYPES", "FailureLevel", "DomainFailure",
    "ServerFailure", "UnauthorizedFailure", "ForbiddenFailure", "NotFoundFailure",
    "LocalFailure", "CacheFailure", "NetworkFailure", "TimeoutFailure",
    "FormatFailure", "ValidationFailure", "UnknownFailure", "ConflictFailure",
    "BadRequestFailure", "ExpectedFailure", "PermissionFailure", "PaymentFailure",
    "DeviceFailure", "Catalog", "CatalogConfig", "FailureOverride", "find_config",
    "__version__",
]
