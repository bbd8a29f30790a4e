APP_NAME = "macbundle"
ENV_PREFIX = "MACBUNDLE_CONFIG__"

DEFAULT_APP_NAME = "Pensive"
DEFAULT_MINIMUM_SYSTEM_VERSION = "14.0"
