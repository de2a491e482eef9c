SECRET_KEY = "test-secret"

# In-memory store: nothing touches the disk
STORE_CONFIG = {
    "path": None,
    "namespace": "nexus_",
}

# No key: the assist client answers with its placeholder text
ASSIST_CONFIG = {
    "api_key": "",
    "model": "gemini-2.5-flash",
    "timeout": 5.0,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SIMULATED_LATENCY = False
SEED_ON_STARTUP = False
