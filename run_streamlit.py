"""
Launcher script for the YouTube Video Summarizer Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--api-url", default="http://localhost:8000", help="URL of the API server")
    args = parser.parse_args()

    project_dir = Path(__file__).parent.absolute()
    app_path = project_dir / "caption_summarizer" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    env["API_URL"] = args.api_url
    # The app is run as a script, so the package must be importable from the project root
    env["PYTHONPATH"] = str(project_dir) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting YouTube Video Summarizer Streamlit app on port {args.port}")
    print(f"API server is expected to be running at: {args.api_url}")

    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except subprocess.CalledProcessError as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
