"""HTTP server runner for the Bookstore API.

Usage:
    python src/server.py                     # Serve on 127.0.0.1:8000
    python src/server.py --port 9000         # Serve on another port
    python src/server.py --reload            # Restart on code changes
"""

import argparse

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Bookstore API server")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Reload the app when source files change")
    args = parser.parse_args()

    # Auto-replenishment and checkout share one in-memory Bookstore, so a single worker only
    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload, workers=1)


if __name__ == "__main__":
    main()
