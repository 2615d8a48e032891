"""
Startup script for the CF Analyzer backend.
Run from backend/app: python start_server.py
"""

import sys
import os
import logging

# Force unbuffered output
os.environ['PYTHONUNBUFFERED'] = '1'

logger = logging.getLogger("start_server")

if __name__ == "__main__":
    import uvicorn

    # Importing the app configures logging from its settings
    from main import app

    settings = app.state.settings

    logger.info(f"Starting CF Analyzer Service on {settings.host}:{settings.port}")
    logger.info(f"API Docs available at: http://localhost:{settings.port}/docs")

    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            reload=False,
            log_level=settings.log_level if settings.log_level != "warn" else "warning",
            access_log=True
        )
    except (OSError, SystemExit) as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)
