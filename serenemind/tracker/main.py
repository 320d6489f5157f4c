"""Serenemind - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from dotenv import load_dotenv

import flet as ft
from serenemind.shared.core.configuration import ValidationLevel, get_config_manager
from serenemind.shared.core.event_bus import EventBus
from serenemind.shared.infrastructure.persistence import JsonFileStorage
from serenemind.tracker.state import Store
from serenemind.tracker.ui.layouts.shell import build_shell

PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()

# Load environment variables from .env file in project root
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

logger = logging.getLogger(__name__)


def configure_logging(logs_dir: Path) -> Path:
    """Configure root logging.

    File handler: everything at LOG_LEVEL (default DEBUG) to serenemind.log.
    Console handler: only WARNING and above.
    """
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "serenemind.log"

    log_level_str = os.getenv("LOG_LEVEL", "DEBUG").upper()
    file_log_level = getattr(logging, log_level_str, logging.DEBUG)
    if not isinstance(file_log_level, int):
        file_log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)  # Observer errors during shutdown

    return log_file_path


async def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info("Initializing Serenemind...")

    config_manager = get_config_manager(PROJECT_ROOT)
    config = config_manager.get_config(ValidationLevel.LENIENT)
    storage = JsonFileStorage(config_manager.storage_path())
    logger.info(f"Using storage file: {storage.path}")

    event_bus = EventBus()
    store = Store.open(event_bus, storage, config)
    await store.app.initialize()

    page.views.append(build_shell(page, store))
    page.update()

    logger.info("Application initialized successfully")


if __name__ == "__main__":
    config = get_config_manager(PROJECT_ROOT).get_config(ValidationLevel.LENIENT)
    log_file = configure_logging(PROJECT_ROOT / config.storage.data_dir / "logs")
    logger.info(f"Logging configured: file={log_file}, console=WARNING+")

    if config.ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {config.ui.flet_port}")
        ft.run(main, view=ft.AppView.WEB_BROWSER, port=config.ui.flet_port, host="127.0.0.1")
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)
