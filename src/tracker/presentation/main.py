from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.logging_config import setup_logging
from src.tracker.presentation.app import create_app

# Configure logging and DI once at process start, before any service is built.
settings = get_api_settings()
setup_logging(settings.LOG_LEVEL)
configure_di()

app = create_app(settings)
