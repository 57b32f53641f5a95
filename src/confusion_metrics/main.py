"""Console script entry point."""

from confusion_metrics.app import run_app


def main() -> None:
    """Run the confusion metrics command line application."""
    run_app()


if __name__ == "__main__":
    main()
