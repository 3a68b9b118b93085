"""
ClientReach - Web Server Entry Point
====================================

Run this to start the API server:
    python main.py

Then open http://127.0.0.1:8000 for the interactive API docs.

To send a campaign from a spreadsheet:
    python run_campaign.py campaign.xlsx
"""

import logging

import uvicorn

from clientreach.infrastructure.config import get_settings


def main():
    """Start the web server."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    settings = get_settings()

    print("\n" + "=" * 50)
    print("   ClientReach - API Server")
    print("=" * 50)
    print(f"\n   Starting server at http://{settings.server.host}:{settings.server.port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "clientreach.web.app:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
