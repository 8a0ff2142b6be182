"""
Lead Scoring Engine - Main Entry Point
======================================
Run this file to start the FastAPI server.

Usage:
    python main.py                    # Start server on port 3000 (or $PORT)
    python main.py --port 8080        # Start server on custom port
    python main.py --reload           # Start with auto-reload (dev mode)

API Documentation:
    http://localhost:3000/docs        # Swagger UI
    http://localhost:3000/redoc       # ReDoc
"""

import argparse
import logging

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from lead_engine.config.settings import API_CONFIG, SERVICE_VERSION, JOB_TITLE_WEIGHTS, COMPANY_TIERS
from lead_engine.config.logging_config import setup_logging

logger = logging.getLogger("lead_engine")


def main():
    parser = argparse.ArgumentParser(description="Lead Scoring Engine API Server")
    parser.add_argument(
        "--host",
        type=str,
        default=API_CONFIG["host"],
        help="Host to bind the server to (default: $HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=API_CONFIG["port"],
        help="Port to run the server on (default: $PORT or 3000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (default: 1)",
    )

    args = parser.parse_args()

    setup_logging()
    logger.info("Lead Scoring Engine %s starting on http://%s:%s", SERVICE_VERSION, args.host, args.port)
    logger.info(
        "Analysis engine initialized with %d job title patterns and %d company tiers",
        len(JOB_TITLE_WEIGHTS),
        len(COMPANY_TIERS),
    )

    uvicorn.run(
        "lead_engine.api.endpoints:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
    )


if __name__ == "__main__":
    main()
