"""Constants for the configuration module."""

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_CLI = "cli"
COMPONENT_SCORING = "scoring"

# File type identifiers
FILE_TYPE_SOURCES = "sources"
FILE_TYPE_SCORING = "scoring"
