import sys
from pathlib import Path

from streamlit.web import cli as streamlit_cli

from impact_analyzer.config.settings import Settings
from impact_analyzer.logging.logger import Log

APP_SCRIPT = Path(__file__).parent / "ui" / "app.py"


def main() -> None:
    """Entry point: load settings -> configure logging -> launch the Streamlit page."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(f"Starting impact analyzer ({settings.app_env}), provider={settings.analysis_provider}")
    sys.argv = ["streamlit", "run", str(APP_SCRIPT), *sys.argv[1:]]
    sys.exit(streamlit_cli.main())


if __name__ == "__main__":
    main()
