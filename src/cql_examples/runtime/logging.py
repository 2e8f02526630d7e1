import sys
from pathlib import Path

from loguru import logger

from src.cql_examples.runtime.context import get_config


def configure_logging(level: str | None = None) -> None:
    """Reset loguru and install the console sink, plus a file sink when configured.

    Args:
        level: Overrides the configured logging level (e.g. from a CLI flag).
    """
    main_config = get_config()
    cfg = main_config.logging
    env = main_config.app.environment
    level = (level or cfg.level).upper()

    logger.remove()

    fmt_plain = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )
    backtrace_on = env != "production"
    diagnose_on = env != "production"

    # Console: always colorized, human-readable
    logger.add(
        sys.stderr,
        level=level,
        format=fmt_plain,
        colorize=True,
        backtrace=backtrace_on,
        diagnose=diagnose_on,
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        is_json_file = cfg.format == "json"
        logger.add(
            str(path),
            level=level,
            format="{message}" if is_json_file else fmt_plain,
            serialize=is_json_file,
            backtrace=backtrace_on,
            diagnose=diagnose_on,
        )

    logger.debug("Logging configured: level={}, file={}", level, cfg.file)
