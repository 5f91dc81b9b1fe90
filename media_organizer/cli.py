import argparse
import logging
import sys
from typing import List, Optional

from media_organizer.core.common.errors import ScanError
from media_organizer.core.config.log_setup import setup_logging
from media_organizer.core.config.settings import settings

logger = logging.getLogger(__name__)


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    from media_organizer.api.app import create_app

    app = create_app(settings)
    logger.info(f"Server starting on http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.LOG_LEVEL.lower())
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    from media_organizer.api.app import build_store
    from media_organizer.features.source_scanner.service.scanner import ScanEngine

    store = build_store(settings)
    try:
        summary = ScanEngine(store).scan(args.path)
    except ScanError as e:
        print(f"Scan failed: {e}", file=sys.stderr)
        return 1
    finally:
        store.close()

    print(f"Added {summary.added_count} new items ({summary.files_seen} files seen, {summary.skipped_count} skipped)")
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    from media_organizer.api.app import build_store

    store = build_store(settings)
    try:
        stats = store.count_by_kind()
    finally:
        store.close()

    print(f"total={stats.total} video={stats.video} image={stats.image}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="media-organizer", description="Index local media files into a catalog")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.HOST)
    serve.add_argument("--port", type=int, default=settings.PORT)
    serve.set_defaults(func=_cmd_serve)

    scan = sub.add_parser("scan", help="Scan a directory into the catalog")
    scan.add_argument("path")
    scan.set_defaults(func=_cmd_scan)

    stats = sub.add_parser("stats", help="Print catalog counts")
    stats.set_defaults(func=_cmd_stats)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.LOG_LEVEL)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
