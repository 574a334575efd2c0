"""
Start the attendance API server.

Responsibility: Local development entry point
"""

import sys
import os

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import uvicorn
from src.config import settings


if __name__ == "__main__":
    port = int(os.environ.get("PORT", settings.app.api_port))

    print("Starting Dutch Parliament Attendance API Server...")
    print(f"API Base URL: http://localhost:{port}/api")
    print(f"Documentation: http://localhost:{port}")
    print(f"Swagger docs at: http://localhost:{port}/docs")
    print("\nPress CTRL+C to stop\n")

    uvicorn.run(
        "api.main:app",
        host=settings.app.api_host,
        port=port,
        reload=settings.app.debug,
        log_level=settings.app.log_level.lower()
    )
