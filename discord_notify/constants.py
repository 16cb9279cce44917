import os

# Configurações globais de ambiente
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Holddown entre envios (segundos). Padrão acima de 1s para respeitar o rate limit do Discord
DEFAULT_HOLDDOWN_SECONDS = 2.0
NOTIFY_HOLDDOWN_SECONDS = float(os.getenv("NOTIFY_HOLDDOWN_SECONDS", str(DEFAULT_HOLDDOWN_SECONDS)))
DISCORD_TIMEOUT_SECONDS = int(os.getenv("DISCORD_TIMEOUT_SECONDS", "10"))

# Valor sentinela de webhookUrl que redireciona para o endpoint de teste
TEST_URL_SENTINEL = "useTestURL"
TEST_WEBHOOK_URL_FILE = os.getenv("TEST_WEBHOOK_URL_FILE", ".test_webhook_url")

# Identidade padrão do remetente
DEFAULT_USERNAME = os.getenv("DEFAULT_USERNAME", "Notification (GitHub)")
DEFAULT_AVATAR_URL = os.getenv(
    "DEFAULT_AVATAR_URL",
    "https://cdn.jsdelivr.net/gh/rjstone/discord-webhook-notify@main/img/default_avatar.png",
)

# Limite do Discord para fields em um embed
MAX_EMBED_FIELDS = 25

# Cores (decimal) e rótulos longos por severidade
SEVERITY_COLORS = {
    "info": int(os.getenv("INFO_COLOR", "65280")),       # #00ff00
    "warn": int(os.getenv("WARN_COLOR", "16750848")),    # #ff9900
    "error": int(os.getenv("ERROR_COLOR", "16711680")),  # #ff0000
}

LONG_SEVERITY = {
    "info": "Informational",
    "warn": "Warning",
    "error": "Error",
}
