"""Client for the makedistribution.com one-dimensional distribution API."""

from .api import (  # noqa: F401
    cumulative,
    density,
    dmakedist,
    get_distribution,
    pmakedist,
    qmakedist,
    quantile,
    query,
    rmakedist,
    sample,
)
from .distribution import (  # noqa: F401
    DistributionDefinition,
    DistributionRef,
    ExistingDistribution,
    create_distribution,
    resolve_distribution,
)
from .endpoints import Operation, build_endpoint  # noqa: F401
from .errors import (  # noqa: F401
    DecodeError,
    HttpError,
    InvalidArgument,
    InvalidOperation,
    MakeDistributionError,
    MalformedResponse,
)
from .settings import ApiSettings, initialize_api, resolve_settings  # noqa: F401
