from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.logging import configure_logging
from .database.bootstrap import apply_schema, list_tables
from .validation.controller import register as register_photo_validation

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["UPLOAD_HOOK_TOKEN"] = getattr(settings, "UPLOAD_HOOK_TOKEN", "")

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s profile=%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            getattr(settings, "SCORING_PROFILE", "brand_weighted"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            vision_api_key=getattr(settings, "VISION_API_KEY", ""),
            vision_endpoint=getattr(settings, "VISION_ENDPOINT"),
            vision_timeout=float(getattr(settings, "VISION_TIMEOUT_SECONDS")),
            scoring_profile=getattr(settings, "SCORING_PROFILE", "brand_weighted"),
            scoring_overrides=getattr(settings, "SCORING_OVERRIDES", None),
            backfill_interval_seconds=float(getattr(settings, "BACKFILL_INTERVAL_SECONDS")),
            backfill_batch_size=int(getattr(settings, "BACKFILL_BATCH_SIZE")),
            upload_bucket=getattr(settings, "UPLOAD_BUCKET", None) or None,
        )

        if bool(getattr(settings, "BACKFILL_ENABLED", False)):
            container.backfill_task.start()

    app.extensions["photo_validation"] = container
    register_photo_validation(app, container)

    return app
