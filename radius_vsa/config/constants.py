"""Configuration constants.

Section names and environment variable names used by the configuration
loader.
"""

# Section names
SECTION_LOGGING = "logging"
SECTION_LIMITS = "limits"
SECTION_VENDOR_FORMATS = "vendor_formats"
SECTION_TYPE_FORMATS = "type_formats"

# Environment variable prefixes
ENV_PREFIX = "RADIUS_VSA_"

# Meta-configuration
ENV_RADIUS_VSA_CONFIG = "RADIUS_VSA_CONFIG"

# Keys overridable from the environment (RADIUS_VSA_<SECTION>_<KEY>)
ENV_OVERRIDABLE_KEYS = {
    SECTION_LOGGING: ["level"],
    SECTION_LIMITS: ["max_value_length"],
}
