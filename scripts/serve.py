"""
Local server launcher
Usage: python scripts/serve.py

Reads PORT (default 3000) and HOST (default 0.0.0.0) from the environment
or from a .env file in the project root.
"""
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

# Load .env before the app imports read their settings
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)
    print(f"📄 Loaded .env from {env_path}")


def main():
    port = int(os.environ.get("PORT", "3000"))
    host = os.environ.get("HOST", "0.0.0.0")
    print(f"🚀 TechShop server is running on http://localhost:{port}")
    print(f"📦 Open your browser and visit: http://localhost:{port}")
    uvicorn.run("api.index:app", host=host, port=port)


if __name__ == "__main__":
    main()
