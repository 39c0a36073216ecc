# Namespace for pipeline steps
from .load_identity import LoadIdentity  # noqa: F401
from .authenticate import AuthenticateSession  # noqa: F401
from .resolve_candidate import SearchAndResolve  # noqa: F401
from .extract_profile import ExtractProfile  # noqa: F401
from .parse_bio import ParseBio  # noqa: F401
from .follow_secondary import FollowSecondaryLinks  # noqa: F401
from .aggregate import AggregateProfile  # noqa: F401
