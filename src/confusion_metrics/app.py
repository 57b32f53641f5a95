"""Application builder for confusion metrics.

This module loads environment configuration, sets up structured logging and
hands control to the command line interface.
"""

from pathlib import Path

from dotenv import load_dotenv

from confusion_metrics.interfaces.cli import CLIInterface
from confusion_metrics.utils.logger import configure_logging, get_logger
from confusion_metrics.utils.settings import get_settings, reset_settings


class Application:
    """Main application class that wires settings, logging and the CLI."""

    def __init__(self, dotenv_path: Path | None = None) -> None:
        """Initialize the application.

        Args:
            dotenv_path: Optional path to .env file to load

        """
        # Load environment variables from .env file if provided
        if dotenv_path:
            load_dotenv(dotenv_path, override=True)
        else:
            load_dotenv(override=True)
        reset_settings()

        settings = get_settings()
        configure_logging(
            log_level=settings.log_level,
            log_format=settings.log_format,
            log_file=settings.log_file_path,
        )
        self.logger = get_logger(__name__)

        self.interface = CLIInterface()

        self.logger.debug(
            "Application initialized",
            interface=self.interface.name,
            settings=settings.model_dump(mode="json"),
            dotenv_loaded=str(dotenv_path) if dotenv_path else "default",
        )

    def run(self) -> None:
        """Run the application."""
        try:
            self.interface.run()
        except Exception as e:
            self.logger.error("Application error", error=str(e))
            raise


def create_app(dotenv_path: Path | None = None) -> Application:
    """Create an application instance.

    Args:
        dotenv_path: Optional path to .env file to load

    Returns:
        Application: Configured application instance

    """
    return Application(dotenv_path=dotenv_path)


def run_app(dotenv_path: Path | None = None) -> None:
    """Create and run the application.

    Args:
        dotenv_path: Optional path to .env file to load

    """
    app = create_app(dotenv_path=dotenv_path)
    app.run()
