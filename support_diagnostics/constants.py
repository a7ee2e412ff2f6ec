PROG_NAME = "support-diagnostics"

# Connection defaults
DEFAULT_HOST_PORT = "localhost:9200"
DEFAULT_NODE_NAME = "_local"

# Collection defaults, applied after argument validation
DEFAULT_STAT_RUNS = 1
DEFAULT_STAT_INTERVAL = 60  # seconds

# Value patterns, matched against the whole argument value
HOST_PORT_PATTERN = r"\S+:\d{1,5}$"
NODE_NAME_PATTERN = r".+"
POSITIVE_INT_PATTERN = r"^[1-9][0-9]*$"

MAX_PORT = 65535

OUTPUT_DIRECTORY_TEMPLATE = "support-diagnostics.{host}.{node}.{timestamp}"
OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"

MASKED_VALUE = "********"

# Environment variables read by the entrypoint only
LOG_LEVEL_ENV = "SUPPORT_DIAGNOSTICS_LOG_LEVEL"
RICH_LOGS_ENV = "SUPPORT_DIAGNOSTICS_RICH_LOGS"
DEFAULT_LOG_LEVEL = "INFO"
