import os

# Configurações globais de ambiente
DEBUG_MODE = os.getenv("SLACKHOOK_DEBUG", "False").lower() == "true"
DEFAULT_USERNAME = os.getenv("SLACKHOOK_DEFAULT_USERNAME", "SlackHook")

# Layout do attachment
FIELDS_HEADER = "Message fields"
SHORT_FIELD_MAX_LENGTH = 20

# Cores por severidade (tokens aceitos pelo Slack ou hex)
DEBUG_COLOR = "#9B30FF"
INFO_COLOR = "good"
WARNING_COLOR = "warning"
DANGER_COLOR = "danger"

# Loggers que nunca são encaminhados pelo handler (evita loop com o transporte HTTP)
DEFAULT_IGNORED_LOGGERS = ("slackhook", "urllib3", "requests")

# Variáveis lidas por HookConfig.from_env
ENV_WEBHOOK_URL = "SLACK_WEBHOOK_URL"
ENV_CHANNEL = "SLACK_CHANNEL"
ENV_USERNAME = "SLACK_USERNAME"
ENV_ICON_EMOJI = "SLACK_ICON_EMOJI"
ENV_ICON_URL = "SLACK_ICON_URL"
ENV_ASYNC = "SLACK_ASYNC"
ENV_DISABLED = "SLACK_DISABLED"
ENV_SORT_FIELDS = "SLACK_SORT_FIELDS"
ENV_MIN_LEVEL = "SLACK_MIN_LEVEL"
ENV_TIMEOUT_SECONDS = "SLACK_TIMEOUT_SECONDS"
