import os
import pathlib
from dotenv import load_dotenv

load_dotenv()

file_path = pathlib.Path(__file__).parents[1]
file_path /= "./catharsis.db"

database_url = os.getenv("CATHARSIS_DATABASE_URL", f"sqlite+aiosqlite:///{file_path}")
host = os.getenv("CATHARSIS_HOST", "0.0.0.0")
port = int(os.getenv("CATHARSIS_PORT", "3000"))
content_max_length = int(os.getenv("CATHARSIS_CONTENT_MAX_LENGTH", "2000"))
static_dir = os.getenv("CATHARSIS_STATIC_DIR")
log_level = os.getenv("CATHARSIS_LOG_LEVEL", "INFO").upper()
reset_requires_confirmation = os.getenv("CATHARSIS_RESET_REQUIRES_CONFIRMATION", "false").lower() in ("1", "true", "yes")

if __name__ == "__main__":
    print(database_url, host, port, content_max_length, static_dir, log_level, reset_requires_confirmation)
