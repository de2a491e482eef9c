import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Browser-style local storage, kept in one JSON file on disk
STORE_CONFIG = {
    "path": os.getenv("STORE_PATH", "instance/nexus_store.json"),
    "namespace": os.getenv("STORE_NAMESPACE", "nexus_"),
}

ASSIST_CONFIG = {
    "api_key": os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY", ""),
    "model": os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
    "timeout": float(os.getenv("ASSIST_TIMEOUT", "30")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Delay mutations like the demo backend does, so spinners are visible
SIMULATED_LATENCY = bool(int(os.getenv("SIMULATED_LATENCY", "1")))
# Fill today's attendance with synthetic check-ins on startup
SEED_ON_STARTUP = bool(int(os.getenv("SEED_ON_STARTUP", "1")))
