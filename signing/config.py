"""Fixed parameters for key generation, key files and logging."""

# RSA key parameters
KEY_SIZE = 4096
PUBLIC_EXPONENT = 65537

# Key files
PUBLIC_KEY_SUFFIX = ".pub"
PRIVATE_KEY_FILE_MODE = 0o600

# PEM block labels
PRIVATE_KEY_LABEL = "RSA PRIVATE KEY"
PUBLIC_KEY_LABEL = "PUBLIC KEY"

# Logging for the key_tools scripts
# Options: "debug", "info", "warning", "error", "critical"
LOG_LEVEL = "info"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
