from __future__ import annotations

import argparse

import structlog

from .config import Settings, settings
from .loaders import load_domains, load_tlds
from .logging_config import setup_logging
from .output import StdoutHandler, validate_domains

log = structlog.get_logger()


def _parse_args(argv: list[str] | None, defaults: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="domain-validator",
        description="Check domains against the IANA TLD list and DNS label syntax.",
    )
    # Single-dash spellings keep older "-tlds FILE" style invocations working
    parser.add_argument(
        "--debug", "-debug", action="store_true", default=defaults.debug, help="enable debug logging."
    )
    parser.add_argument(
        "--tlds", "-tlds", default=defaults.tlds_path, metavar="PATH", help="the path to the IANA TLD list."
    )
    parser.add_argument(
        "--domains",
        "-domains",
        default=defaults.domains_path,
        metavar="PATH",
        help="the path to the list of domains.",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    args = _parse_args(argv, settings)
    cfg = settings.model_copy(
        update={"debug": args.debug, "tlds_path": args.tlds, "domains_path": args.domains}
    )

    setup_logging(cfg.debug)
    log.debug("run_started", tlds_path=cfg.tlds_path, domains_path=cfg.domains_path)

    # 1. Reference TLD list
    tlds = load_tlds(cfg.tlds_path, debug=cfg.debug, skip_blank=cfg.skip_blank_tlds)
    if not tlds.ok:
        raise SystemExit(f"error: could not load TLDs from {tlds.path!r}: {tlds.error}")

    # 2. Candidate domains
    domains = load_domains(cfg.domains_path, debug=cfg.debug)
    if not domains.ok:
        raise SystemExit(f"error: could not load domains from {domains.path!r}: {domains.error}")

    # 3. Report, in input order
    handler = StdoutHandler()
    count = 0
    for result in validate_domains(domains.entries, tlds.entries):
        handler.emit_result(result)
        count += 1

    log.debug("run_complete", domains=count)


def main() -> None:
    run()


if __name__ == "__main__":
    main()
