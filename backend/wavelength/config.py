import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    # Realtime worker; empty picks a platform default in create_app()
    SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Game
    MIN_TARGET_POSITION = int(os.environ.get("MIN_TARGET_POSITION", "10"))
    MAX_TARGET_POSITION = int(os.environ.get("MAX_TARGET_POSITION", "90"))
    MAX_NAME_LENGTH = int(os.environ.get("MAX_NAME_LENGTH", "16"))
    MAX_CLUE_LENGTH = int(os.environ.get("MAX_CLUE_LENGTH", "80"))
