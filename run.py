"""Development entry point for running the parameter display service."""

import os

from dotenv import load_dotenv

from paramdisplay.app import create_app

load_dotenv()

app = create_app()

if __name__ == "__main__":
    app.run(
        host=os.getenv("PARAMDISPLAY_HOST", "127.0.0.1"),
        port=int(os.getenv("PARAMDISPLAY_PORT", "5000")),
    )
