import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Storage: "memory" keeps everything in process, "sql" uses DATABASE_URL
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tripdesk.db")

    # Load the demo destinations, hotels and flights at startup
    SEED_CATALOG = os.getenv("SEED_CATALOG", "true").lower() == "true"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
