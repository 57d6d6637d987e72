import os
import tempfile

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "bunksmart-test"))

DEFAULT_TARGET_PERCENTAGE = 75.0

# Never reach a real model from tests
ADVISOR_ENABLED = False
ADVISOR_MODEL = "gemini/gemini-2.0-flash"
ADVISOR_TIMEOUT_SECONDS = 1

DEBUG = False
TESTING = True
