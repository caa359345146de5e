from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from snaptrack.config.loader import ConfigError, load_config
from snaptrack.logging.error_log import ErrorLogBuffer
from snaptrack.logging.init import log_summary, setup_logging
from snaptrack.models.config_models import TrackerConfig
from snaptrack.models.error_record import ErrorRecord
from snaptrack.services.render import export_view, render_view
from snaptrack.services.session import SessionState, SessionStateError, TrackerSession
from snaptrack.services.store import SnapshotStore
from snaptrack.services.summary import SUMMARY_PREFIX, render_summary_line

"""CLI entrypoint.

Each invocation opens a TrackerSession restored from the configured store,
performs one operation and exits:

    snaptrack baseline morning.tsv
    snaptrack update  afternoon.tsv
    snaptrack show --search done --sort Status
    snaptrack summary
    snaptrack reset

Text is read from stdin when FILE is omitted or "-".
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_INPUT_ERROR = 2

STDIN_SOURCE = "<stdin>"


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env (SNAPTRACK_* overrides). Missing file is not an error."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="snaptrack", description="Track status changes between two tab-delimited snapshots"
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help="Config file (default: config/tracker.yml)")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("baseline", help="Capture the baseline snapshot")
    b.add_argument("source", nargs="?", default="-", help="Tab-delimited file, '-' for stdin")
    b.add_argument("--replace", action="store_true", help="Reset first when a baseline already exists")

    u = sub.add_parser("update", help="Replace the current snapshot")
    u.add_argument("source", nargs="?", default="-", help="Tab-delimited file, '-' for stdin")

    sub.add_parser("reset", help="Forget baseline and current snapshots")

    s = sub.add_parser("show", help="Print the diffed view")
    s.add_argument("--search", default="", help="Case-insensitive filter over all fields")
    s.add_argument(
        "--sort",
        action="append",
        default=[],
        metavar="FIELD",
        help="Sort by FIELD; repeating the same field flips the direction",
    )
    s.add_argument("--export", type=Path, default=None, help="Also write the view (.tsv/.csv/.xlsx)")

    sub.add_parser("summary", help="Print total / changed / new counts")
    return p.parse_args(argv)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _open_session(cfg: TrackerConfig) -> TrackerSession:
    store = SnapshotStore(Path(cfg.store.directory)) if cfg.store.enabled else None
    return TrackerSession(store=store)


def _emit_summary(session: TrackerSession) -> None:
    line = render_summary_line(session.get_summary())
    log_summary(line[len(SUMMARY_PREFIX):])


def _capture(session: TrackerSession, args: argparse.Namespace, cfg: TrackerConfig) -> int:
    logger = setup_logging()
    source_name = STDIN_SOURCE if args.source == "-" else args.source
    try:
        text = _read_source(args.source)
    except (OSError, UnicodeDecodeError) as e:
        buffer = ErrorLogBuffer(Path(cfg.logs_directory))
        buffer.append(ErrorRecord.create(args.command, source_name, "UNREADABLE_INPUT", str(e)))
        buffer.flush()
        logger.error(f"input: cannot read {source_name}: {e}")
        return EXIT_INPUT_ERROR

    if args.command == "baseline":
        if args.replace and session.state is SessionState.TRACKING:
            session.reset()
        ok = session.set_baseline(text)
    else:
        ok = session.update(text)

    if not ok:
        buffer = ErrorLogBuffer(Path(cfg.logs_directory))
        buffer.append(
            ErrorRecord.create(args.command, source_name, "MALFORMED_INPUT", session.last_error)
        )
        written = buffer.flush()
        logger.error(f"input: {session.last_error}")
        logger.debug(f"error log: {written}")
        return EXIT_INPUT_ERROR

    _emit_summary(session)
    return EXIT_SUCCESS


def _show(session: TrackerSession, args: argparse.Namespace) -> int:
    logger = setup_logging()
    if session.state is SessionState.EMPTY:
        logger.info("no baseline set; run 'snaptrack baseline' first")
        return EXIT_SUCCESS

    session.set_search(args.search)
    for field in args.sort:
        session.set_sort(field)
    view = session.get_view()
    print(render_view(view, session.header))
    if args.export is not None:
        try:
            written = export_view(view, session.header, args.export)
        except (ValueError, OSError) as e:
            logger.error(f"export: {e}")
            return EXIT_FATAL
        logger.info(f"exported {len(view)} rows to {written}")
    _emit_summary(session)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when no list was given (tests pass [] explicitly)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        logger = setup_logging(debug=True)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    session = _open_session(cfg)
    try:
        if args.command in ("baseline", "update"):
            return _capture(session, args, cfg)
        if args.command == "reset":
            session.reset()
            return EXIT_SUCCESS
        if args.command == "show":
            return _show(session, args)
        _emit_summary(session)
        return EXIT_SUCCESS
    except SessionStateError as e:
        logger.error(f"session: {e}")
        return EXIT_FATAL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
