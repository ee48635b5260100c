import logging
import signal
import sys
from typing import Optional, Sequence

from app_config import AppConfigurationError, build_workout_totals, load_app_config
from runtime import ConsoleReporter, plan_summary
from workout import SecondClock, TimerController


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("interval_timer")


def setup_signal_handlers(controller: TimerController, reporter: ConsoleReporter) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        signal_name = signal.Signals(signum).name
        print(f"\n👋 {signal_name} received, stopping...\n")
        controller.stop()
        reporter.finished.set()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    config_path = args[0] if args else None

    logger = setup_logging()
    try:
        app_config = load_app_config(config_path)
    except AppConfigurationError as error:
        logger.error(f"App configuration error: {error}")
        return 1

    logging.getLogger().setLevel(app_config.runtime.log_level)
    logger.info("Loaded runtime config: %s", app_config.source_file)

    controller: Optional[TimerController] = None
    try:
        totals = build_workout_totals(app_config.workout)
        logger.info(
            "Workout mode %s: %s",
            app_config.workout.mode,
            plan_summary(totals),
        )

        reporter = ConsoleReporter(session_cues=app_config.runtime.session_cues)
        controller = TimerController(
            totals,
            auto_next=app_config.workout.auto_next,
            on_tick=reporter.on_tick,
            on_phase=reporter.on_phase,
            on_warning=reporter.on_warning,
            on_done=reporter.on_done,
            clock=SecondClock(app_config.runtime.tick_interval_seconds),
        )
        setup_signal_handlers(controller, reporter)

        controller.start()
        # Short waits keep the main thread responsive to signals.
        while not reporter.wait(timeout=0.5):
            pass
        return 0

    except KeyboardInterrupt:
        print("\n👋 Shutting down...\n")
        return 0

    except Exception as error:
        logger.error(f"Unexpected error: {error}", exc_info=True)
        return 1

    finally:
        if controller:
            controller.stop()


if __name__ == "__main__":
    sys.exit(main())
