"""Per-record resolvers: originating error log and guarded hardware target."""
from resolvers.error_log import resolve_error_log  # noqa: F401
from resolvers.hardware_target import resolve_hardware_target  # noqa: F401
from resolvers.types import ErrorLogResult, LookupStatus, TargetResult  # noqa: F401
