import json
import sys
from dataclasses import asdict
from datetime import datetime, timedelta, timezone

from .services.config import DEFAULT_CONFIG
from .services.conversion import convert_date, format_date
from .services.errors import InvalidDateError

USAGE = "Usage: nepal-sambat [YYYY MM DD] [--json]"


def _today() -> tuple[int, int, int]:
    site_tz = timezone(timedelta(hours=DEFAULT_CONFIG.site.utc_offset_hours))
    today = datetime.now(site_tz).date()
    return today.year, today.month, today.day


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    as_json = "--json" in args
    args = [a for a in args if a != "--json"]

    if not args:
        year, month, day = _today()
    elif len(args) == 3:
        try:
            year, month, day = (int(a) for a in args)
        except ValueError:
            print(USAGE, file=sys.stderr)
            return 1
    else:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        ns_date = convert_date(year, month, day)
    except InvalidDateError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    formatted = format_date(ns_date)
    if as_json:
        payload = {"date": asdict(ns_date), "formatted": asdict(formatted)}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(formatted.readable)
        print(formatted.numerical)
    return 0


if __name__ == "__main__":
    sys.exit(main())
