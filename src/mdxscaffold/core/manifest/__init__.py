"""Page manifests and scaffolding profiles."""

from mdxscaffold.core.manifest.paths import COMPLETE_PATHS, STARTER_PATHS
from mdxscaffold.core.manifest.profiles import Profile, build_profile, get_profile

__all__ = ["COMPLETE_PATHS", "STARTER_PATHS", "Profile", "build_profile", "get_profile"]
