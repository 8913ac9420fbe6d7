# settings.py
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("DADVISOR_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("DADVISOR_LOG_FILE") or None
