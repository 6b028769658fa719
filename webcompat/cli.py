#!/usr/bin/env python3

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

import yaml

from .config import get_config, reload_config
from .errors import Unavailable
from .runtime import CapabilityMap, instantiate, require_type
from .utils.logging import setup_logging
from .web.cookies import HTTPCookieStore
from .web.legacy import LEGACY_COOKIE_STORAGE_SELECTORS, LEGACY_WEB_VIEW_SELECTORS


def probe_engine(engine_name: str) -> Dict[str, Any]:
    """Resolve the legacy engine and report which selectors it answers."""
    report: Dict[str, Any] = {"engine": engine_name, "available": False}

    try:
        engine_type = require_type(engine_name)
    except Unavailable as e:
        report["error"] = str(e)
        report.update(CapabilityMap.unavailable(engine_name, LEGACY_WEB_VIEW_SELECTORS).as_dict())
        return report

    instance = instantiate(engine_type)
    if instance is None:
        report["error"] = f"{engine_name} could not be instantiated"
        report.update(CapabilityMap.unavailable(
            engine_name, LEGACY_WEB_VIEW_SELECTORS, "Instantiation failed").as_dict())
        return report

    report["available"] = True
    report.update(CapabilityMap.probe(instance, LEGACY_WEB_VIEW_SELECTORS, engine_name).as_dict())
    return report


def probe_cookie_storage() -> Dict[str, Any]:
    cookie_config = get_config().get('cookies') or {}
    store = HTTPCookieStore()
    return {
        "storage_class": cookie_config.get('storage_class'),
        "available": store.is_available,
        "selectors": list(LEGACY_COOKIE_STORAGE_SELECTORS),
        "cookie_count": len(store.get_all_cookies()),
    }


def print_probe_report(engine: Dict[str, Any], cookies: Dict[str, Any]) -> None:
    if engine["available"]:
        print(f"✅ Legacy engine {engine['engine']} resolved")
    else:
        print(f"❌ Legacy engine {engine['engine']} unavailable: {engine.get('error', '')}")
    for name, cap in engine["capabilities"].items():
        mark = "+" if cap["available"] else "-"
        print(f"  {mark} {name:<45} {cap['notes']}")

    state = "resolved" if cookies["available"] else "unavailable"
    print(f"Cookie storage {cookies['storage_class']}: {state} ({cookies['cookie_count']} cookies)")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Legacy web engine adapter CLI")
    parser.add_argument("--config", help="Path to a webcompat YAML config")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    probe_parser = subparsers.add_parser("probe", help="Report legacy engine capabilities")
    probe_parser.add_argument("--engine", help="Legacy engine type name (default from config)")
    probe_parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    subparsers.add_parser("config", help="Print the effective configuration")

    args = parser.parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()
    setup_logging((config.get('logging') or {}).get('level', 'INFO'))

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "probe":
        engine_name = args.engine or (config.get('web_engine') or {}).get('legacy_class') or 'UIWebView'
        engine = probe_engine(engine_name)
        cookies = probe_cookie_storage()
        if args.json:
            print(json.dumps({"engine": engine, "cookies": cookies}, ensure_ascii=False, indent=2))
        else:
            print_probe_report(engine, cookies)
        return 0 if engine["available"] else 1

    elif args.command == "config":
        print(yaml.safe_dump(config, sort_keys=False), end="")
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
