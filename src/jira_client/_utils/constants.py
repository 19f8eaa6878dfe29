# Environment variables
ENV_BASE_URL = "JIRA_BASE_URL"
ENV_EMAIL = "JIRA_EMAIL"
ENV_API_TOKEN = "JIRA_API_TOKEN"
ENV_BEARER_TOKEN = "JIRA_BEARER_TOKEN"
ENV_SESSION_COOKIE = "JIRA_SESSION_COOKIE"
ENV_TIMEOUT = "JIRA_TIMEOUT"
ENV_DEBUG = "JIRA_DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_COOKIE = "Cookie"
HEADER_EXPERIMENTAL_API = "X-ExperimentalApi"
HEADER_USER_AGENT = "User-Agent"

MEDIA_TYPE_JSON = "application/json"

# API roots
PLATFORM_API = "/rest/api/3"
AGILE_API = "/rest/agile/1.0"
SERVICE_DESK_API = "/rest/servicedeskapi"

LOGGER_NAME = "jira_client"
USER_AGENT_PRODUCT = "JiraClient.Python"
PACKAGE_NAME = "jira-client"
