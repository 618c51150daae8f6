import argparse
import asyncio
import dataclasses
import logging
import os
import sys

from dotenv import load_dotenv

from .application import ReflectionConfig, bootstrap_app
from .domain import ReflectionError
from .infrastructure import load_records_from_yaml

load_dotenv()
logger = logging.getLogger(__name__)


def load_app_config() -> ReflectionConfig:
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    metrics_log_path = os.getenv("METRICS_LOG_PATH", "").strip() or None
    db_path = os.getenv("DB_PATH", "").strip() or None
    records_key = os.getenv("RECORDS_KEY", "records").strip() or "records"
    config = ReflectionConfig(
        log_level=log_level,
        metrics_log_path=metrics_log_path,
        db_path=db_path,
        records_key=records_key,
    )
    logger.debug(
        "Config loaded: log_level=%s, metrics=%s, db_path=%s, records_key=%s",
        config.log_level,
        config.metrics_log_path or "off",
        config.db_path or "none",
        config.records_key,
    )
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reflectkit",
        description="Hydrate records from YAML or SQLite into instances of a class and print them.",
    )
    parser.add_argument("type", help="class to hydrate, as 'package.module:Class'")
    parser.add_argument("source", help="YAML records file, or SQLite database when --query is given")
    parser.add_argument("--query", help="SQL query whose rows are hydrated")
    parser.add_argument("--key", help="top-level YAML key holding the record list")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_app_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if args.query:
        config = dataclasses.replace(config, db_path=args.source)

    try:
        with bootstrap_app(config) as container:
            cls = container.load_type(args.type)
            if args.query:
                logger.info("Hydrating %s from %s", cls.__qualname__, args.source)
                instances = asyncio.run(container.fetch_all(cls, args.query))
            else:
                rows = load_records_from_yaml(args.source, key=args.key or config.records_key)
                logger.info("Hydrating %d %s record(s) from %s", len(rows), cls.__qualname__, args.source)
                instances = container.hydrate_many(cls, rows)
            for instance in instances:
                print(repr(instance))
    except ReflectionError as exc:
        logger.error("%s", exc)
        return 1
    except Exception:
        logger.exception("Unexpected failure")
        raise
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
