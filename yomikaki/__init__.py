import os

from dotenv import load_dotenv

load_dotenv()

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# AI backend used for kanji suggestions (gemini, openai)
AI_BACKEND = os.getenv("YOMIKAKI_BACKEND", "gemini")
MODEL_GEMINI = os.getenv("YOMIKAKI_MODEL_GEMINI", "gemini-2.5-flash")
MODEL_OPENAI = os.getenv("YOMIKAKI_MODEL_OPENAI", "gpt-4o-mini")

# Inputs shorter than this never reach the suggestion service
KANJI_MIN_LENGTH = int(os.getenv("YOMIKAKI_KANJI_MIN_LENGTH", "2"))

# Seconds to wait for a kanji suggestion before giving up on it
SUGGEST_TIMEOUT = float(os.getenv("YOMIKAKI_SUGGEST_TIMEOUT", "10"))
