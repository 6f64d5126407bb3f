"""
Configuração da aplicação de demonstrações
"""
import os
from dotenv import load_dotenv

load_dotenv()

APP_TITULO = "Padrões GoF"
APP_VERSAO = "1.0.0"

# Servidor
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
APP_RELOAD = os.getenv("APP_RELOAD", "false").lower() in ("1", "true", "sim")
APP_LOG_LEVEL = os.getenv("APP_LOG_LEVEL", "info")

# Origens separadas por vírgula
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
