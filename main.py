"""Call center KPI report tool - Entry point."""

from dotenv import load_dotenv

from call_report.cli import app

# Load environment variables from .env file
load_dotenv()

if __name__ == "__main__":
    app()
