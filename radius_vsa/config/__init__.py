"""radius_vsa configuration package

- INI file loading with environment variable fallbacks
- Pydantic schema validation
- Immutable format policy construction
"""

from .config import VsaConfig
from .loader import load_config
from .schema import RadiusVsaConfigSchema

__all__ = [
    "VsaConfig",
    "load_config",
    "RadiusVsaConfigSchema",
]
