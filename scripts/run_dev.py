"""
Development server launcher.

Loads .env, configures logging and runs the API under uvicorn with reload.

Usage:
    python scripts/run_dev.py [port]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn
from loguru import logger

from app.core.config import settings
from app.core.logger import setup_logger

if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000
    setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    logger.info(
        f"{settings.APP_DISPLAY_NAME} development server",
        api=f"http://localhost:{port}",
        docs=f"http://localhost:{port}/docs",
        database=settings.DATABASE_URL,
    )
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, reload=True, log_level="info")
