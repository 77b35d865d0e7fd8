"""
Configuration-related constants and resource limits.
"""

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

DEFAULT_CONFIG_FILENAME = "eventmanager.yaml"

ENV_PREFIX = "EVENTMGR_"
