"""Global pytest configuration."""

import os

# Tests never reach the real provider: force the deterministic stub client
os.environ["OPENAI_API_KEY"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")
