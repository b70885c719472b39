"""Console entrypoint for the GUI (fb-gui)."""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)


def main() -> int:
    """Launch the GUI application."""
    # Configure logging before anything else
    from fb_common.api import CatalogError, configure_logging, error_to_payload

    configure_logging()

    # Import Qt after logging is configured
    from PySide6.QtWidgets import QApplication

    from fb_gui.app import ServiceContainer, create_app

    app = QApplication(sys.argv)
    app.setApplicationName("Feature Browser")
    app.setOrganizationName("fb")

    services = ServiceContainer()
    try:
        catalog = services.catalog_service.catalog
    except CatalogError as exc:
        logger.error("Feature catalog is unusable: %s", error_to_payload(exc))
        return 1
    logger.info(
        "Catalog ready: %d features in %d categories", catalog.total, catalog.category_count
    )

    window = create_app(services)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
