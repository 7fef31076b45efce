"""Streamlit script entry point: ``streamlit run impact_analyzer/ui/app.py``."""

from impact_analyzer.config.settings import Settings
from impact_analyzer.logging.logger import Log
from impact_analyzer.ui.page import render_page

settings = Settings()
Log.configure(settings.log_level)
render_page(settings)
