import os

# Keep Settings deterministic regardless of a developer's .env / shell.
os.environ.setdefault("API_V1_PREFIX", "/api/v1")
os.environ.setdefault("PRICE_STEP", "0.05")
os.environ.setdefault("LOG_LEVEL", "INFO")
