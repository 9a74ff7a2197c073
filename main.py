# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: main.py
# -----------------------------------------------------------------------------
from cli.AppContainer import AppContainer
from config.Config import Config
from utility.logging_utils import get_logger

logger = get_logger("main")


def main() -> None:
    try:
        cfg = Config.from_env()
    except (ValueError, RuntimeError) as e:
        logger.error("Configuration error: %s", e)
        print(f"Configuration error: {e}")
        return

    logger.info("Starting semantic-qa with %s", cfg.summary())
    container = AppContainer(cfg)

    if not container.corpus.available:
        print(f"Warning: corpus '{cfg.corpus_path}' could not be loaded; searches will find no matches.")

    if cfg.startup_healthcheck:
        results = container.test_runner.run_all(run_completion=True)
        print("\n=== Startup Checks ===")
        for name, ok in results.items():
            print(f"{name}: {'PASS' if ok else 'FAIL'}")

    container.loop.run()


if __name__ == "__main__":
    main()
