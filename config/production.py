import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/bunksmart")

DEFAULT_TARGET_PERCENTAGE = float(os.getenv("DEFAULT_TARGET_PERCENTAGE", "75"))

ADVISOR_ENABLED = bool(int(os.getenv("ADVISOR_ENABLED", "1")))
ADVISOR_MODEL = os.getenv("ADVISOR_MODEL", "gemini/gemini-2.0-flash")
ADVISOR_TIMEOUT_SECONDS = int(os.getenv("ADVISOR_TIMEOUT_SECONDS", "10"))

DEBUG = False
