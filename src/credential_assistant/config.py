import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

# Load environment variables from .env file
load_dotenv()

# Paths
PACKAGE_DIR = Path(__file__).resolve().parent
PROJ_ROOT = PACKAGE_DIR.parents[1]


def log_project_root() -> None:
    """Log the resolved project root path."""
    logger.info(f"PROJ_ROOT path is: {PROJ_ROOT}")


# Knowledge base data file
KNOWLEDGE_PATH = Path(
    os.getenv(
        "ASSISTANT_KNOWLEDGE_PATH",
        PACKAGE_DIR / "assistant" / "knowledge.yaml",
    )
)

# Presentation-only "assistant is typing" delay, in seconds
TYPING_DELAY_MIN = float(os.getenv("ASSISTANT_TYPING_DELAY_MIN", 0.8))
TYPING_DELAY_MAX = float(os.getenv("ASSISTANT_TYPING_DELAY_MAX", 1.2))

# Activity log directory; empty disables auditing
AUDIT_DIR = os.getenv("ASSISTANT_AUDIT_DIR", "")

# Conversations kept by the HTTP app before the least recently used is dropped
MAX_SESSIONS = int(os.getenv("ASSISTANT_MAX_SESSIONS", 1000))

# Print [debug] lines in the REPL
CHATBOT_DEBUG = os.getenv("CHATBOT_DEBUG", "0") == "1"

# Logging level
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

try:
    logger.remove()
except ValueError:
    pass
logger.add(sys.stdout, level=LOG_LEVEL)


if __name__ == "__main__":
    log_project_root()
