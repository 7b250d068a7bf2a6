"""ghuser - GitHub user profile lookup."""

from ghuser.models.profile import Profile
from ghuser.config import LookupConfig
from ghuser.core.lookup import UserLookup
from ghuser.core.formatter import format_profile
from ghuser.core.parser import parse_profile

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "UserLookup",
    "LookupConfig",
    # Models
    "Profile",
    # Helpers
    "format_profile",
    "parse_profile",
    "__version__",
]
