from .origin import (
    MAX_SOFTWARE_NAME_BYTES,
    MAX_SOFTWARE_VERSION_BYTES,
    ORIGIN_ID,
    Origin,
    OriginEnterpriseID,
)
from .version import SoftwareVersion

__all__ = [
    "ORIGIN_ID",
    "MAX_SOFTWARE_NAME_BYTES",
    "MAX_SOFTWARE_VERSION_BYTES",
    "Origin",
    "OriginEnterpriseID",
    "SoftwareVersion",
]
