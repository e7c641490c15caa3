"""Application configuration via environment variables."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# Database (last-used form inputs)
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite+aiosqlite:///{BASE_DIR / 'deckboards.db'}")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

# Layout search
MAX_TOTAL_BOARDS = int(os.getenv("MAX_TOTAL_BOARDS", "30"))
MAX_RESULTS = int(os.getenv("MAX_RESULTS", "5"))

# Share text
SHARE_ATTRIBUTION = os.getenv(
    "SHARE_ATTRIBUTION", "Powered by LASCO JAPAN Co., Ltd. https://lasco.jp/"
)

# Initial form values
DEFAULT_INPUTS = {
    "install_width": 3000,
    "board_width": 150,
    "joint_width": 5,
    "min_board_width": 80,
    "edge_joints": True,
}
