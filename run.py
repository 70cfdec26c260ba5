#!/usr/bin/env python3
"""
Run the Guide Admin server.

Usage:
    python run.py
"""

import uvicorn

from guide_admin.core.config import get_server_config


def main():
    server = get_server_config()
    host = server.get("host", "0.0.0.0")
    port = int(server.get("port", 8000))

    print("Starting Guide Admin...")
    print(f"URL: http://{host}:{port}/admin")

    uvicorn.run(
        "guide_admin.api.main:app",
        host=host,
        port=port,
        log_level=server.get("log_level", "info")
    )


if __name__ == "__main__":
    main()
