"""Default values for extension configuration."""

# Built-in extension used when no configuration is supplied
DEFAULT_EXTENSION = "developer"
DEFAULT_DISPLAY_NAME = "Developer"

# Seconds; applied to the default extension only, other extensions
# without a timeout fall back to the transport's own default
DEFAULT_EXTENSION_TIMEOUT = 300
