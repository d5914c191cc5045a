# config.py
import os
from datetime import timedelta
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()

# A session may receive one verse per window; the session cookie lives exactly as long
VERSE_WINDOW = timedelta(hours=24)

class Config:
    SECRET_KEY = os.getenv('SESSION_SECRET', 'default_secret')  # replace with a real secret in production
    PORT = int(os.getenv('PORT', 3000))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    BIBLE_FILE = os.getenv('BIBLE_FILE', os.path.join(BASE_DIR, 'bible.json'))
    REQUESTS_FILE = os.getenv('REQUESTS_FILE', os.path.join(BASE_DIR, 'requests.json'))

    # Comma-separated origins allowed to fetch /export.csv; empty means none
    EXPORT_CORS_ORIGINS = [o.strip() for o in os.getenv('EXPORT_CORS_ORIGINS', '').split(',') if o.strip()]

    PERMANENT_SESSION_LIFETIME = VERSE_WINDOW
    VERSE_WINDOW = VERSE_WINDOW
