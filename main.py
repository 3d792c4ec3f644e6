"""
reviewstats - Product Review Reports

CLI entry point: load a JSON-lines review dump and write the CSV reports.
"""

import argparse
import logging
import sys

from reviewstats.agents.ingestion import RecordLoader
from reviewstats.errors import InvalidDateFormat
from reviewstats.orchestrator import PipelineOrchestrator
import config.settings as settings


def setup_logging(log_level: str = "INFO", log_file: str = settings.LOG_FILE):
    """Configure logging for the entire application."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="reviewstats - popularity, rating and search reports for product reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive: prompts for the date window and the search text
  python main.py reviews.json

  # Non-interactive
  python main.py reviews.json --start-date "01 01, 2014" \\
                 --end-date "02 28, 2014" --search great

  # Write reports somewhere other than the current directory
  python main.py reviews.json --output-dir reports/
        """
    )

    parser.add_argument(
        "input_path",
        help="JSON-lines file with one review record per line"
    )

    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for the CSV reports (default: current directory)"
    )

    parser.add_argument(
        "--start-date",
        help=f"Start of the period report ({settings.DATE_INPUT_FORMAT}); prompted if omitted"
    )

    parser.add_argument(
        "--end-date",
        help=f"End of the period report ({settings.DATE_INPUT_FORMAT}); prompted if omitted"
    )

    parser.add_argument(
        "--search",
        help="Text to search for in reviews; prompted if omitted"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help=f"Log file, empty to disable (default: {settings.LOG_FILE})"
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    try:
        records = RecordLoader(encoding=settings.INPUT_ENCODING).load(args.input_path)

        orchestrator = PipelineOrchestrator(
            output_config=settings.OutputConfig.from_directory(args.output_dir)
        )
        orchestrator.run(
            records,
            start_date=args.start_date,
            end_date=args.end_date,
            search_term=args.search
        )

    except InvalidDateFormat as e:
        logger.error(f"Invalid date input: {e}")
        print(f"\n❌ {e}")
        return 1

    except OSError as e:
        logger.error(f"I/O failure: {e}", exc_info=True)
        print(f"\n❌ I/O error: {e}")
        return 1

    except EOFError:
        logger.error("Input ended before all prompts were answered")
        print("\n❌ Input ended before all prompts were answered")
        return 1

    except KeyboardInterrupt:
        logger.warning("Run interrupted by user")
        print("\n⚠️  Run interrupted")
        return 1

    except Exception as e:
        logger.error(f"Run failed: {e}", exc_info=True)
        print(f"\n❌ Run failed: {e}")
        return 1

    logger.info("reviewstats completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
