# ui_analytics/__init__.py

from dotenv import load_dotenv

# Load .env file at module import time
# This makes UI_ANALYTICS_* settings available everywhere
load_dotenv()
