"""Constants for CPE candidate generation and the CLI."""

# CPE part for applications
CPE_PART_APPLICATION = "a"

# Go module names have no scheme; one is added so the URL parser finds the host
GO_MODULE_URL_SCHEME = "http://"

# Java group IDs must start with one of these to be split into vendor/product
JAVA_GROUP_ID_PREFIXES = ("com", "org")
JAVA_GROUP_ID_MIN_FIELDS = 3

# Plugin namespaces whose group IDs say nothing about the plugin's own vendor
JIRA_PLUGIN_POM_PROPERTIES_GROUP_ID = "com.atlassian.jira.plugins"
JENKINS_PLUGIN_POM_PROPERTIES_GROUP_IDS = (
    "io.jenkins.plugins",
    "org.jenkins.plugins",
    "org.jenkins-ci.plugins",
    "io.jenkins-ci.plugins",
    "com.cloudbees.jenkins.plugins",
)

# Specificity weights per CPE attribute (higher = more specific when set)
SPECIFICITY_WEIGHT_PART = 2
SPECIFICITY_WEIGHT_VENDOR = 3
SPECIFICITY_WEIGHT_PRODUCT = 4
SPECIFICITY_WEIGHT_VERSION = 1
SPECIFICITY_WEIGHT_TARGET_SW = 1

# CLI defaults
DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_RESULTS = 0  # 0 means no display limit
SEPARATOR_LINE_LENGTH = 80

# Environment variable names
ENV_LOG_LEVEL = "CPE_CANDIDATES_LOG_LEVEL"
ENV_MAX_RESULTS = "CPE_CANDIDATES_MAX_RESULTS"
