import logging

_configured = False

def setup_logging(level: str = "INFO") -> None:
    """Настраивает корневой логгер один раз за процесс."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # httpx пишет каждую попытку запроса в INFO, это засоряет консоль
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    _configured = True
