import argparse
import json
import sys
from datetime import date

from api.services.hour_tracker import HourTracker, TimingSnapshot
from api.services.orchestrators.divine_timing import build_viewmodel
from api.services.solar import init_paths
from api.services.util.place_defaults import InvalidLocationError, normalize_place


def _snapshot_line(snap: TimingSnapshot, element: str) -> str:
    if not snap.available:
        return f"{snap.at.isoformat()} no active planetary hour, recompute pending"
    hour = snap.current_hour
    line = (
        f"{snap.at.isoformat()} {hour.planet.name} ({hour.planet.element}) "
        f"{snap.alignment.quality} {snap.alignment.harmony_score}% "
        f"closes in {snap.window.closes_in} [{snap.window.urgency}]"
    )
    if snap.window.next_optimal_window is not None:
        nxt = snap.window.next_optimal_window
        line += f", next {element} window {nxt.planet.name} in {snap.window.next_window_in}"
    if not snap.day.is_accurate:
        line += " (approximate)"
    return line


def _place(args: argparse.Namespace) -> dict:
    place = {"lat": args.lat, "lon": args.lon}
    if args.tz:
        place["tz"] = args.tz
    return place


def cmd_hours(args: argparse.Namespace) -> None:
    vm = build_viewmodel(args.date, _place(args), args.element, {"lang": args.lang})
    print(json.dumps(vm.model_dump(mode="json"), ensure_ascii=False, indent=2))


def cmd_now(args: argparse.Namespace) -> None:
    vm = build_viewmodel(None, _place(args), args.element, {"lang": args.lang, "purpose": args.purpose})
    payload = {
        "status": vm.status,
        "current_hour": vm.current_hour.model_dump() if vm.current_hour else None,
        "alignment": vm.alignment.model_dump() if vm.alignment else None,
        "window": vm.window.model_dump() if vm.window else None,
        "guidance": vm.guidance.model_dump() if vm.guidance else None,
        "rest_day": vm.rest_day.is_rest_day,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_watch(args: argparse.Namespace) -> None:
    location, _flags = normalize_place(_place(args))
    tracker = HourTracker(location, args.element)
    for snap in tracker.run(interval=args.interval, count=args.count):
        print(_snapshot_line(snap, tracker.user_element), flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Planetary hours and element alignment")
    sub = parser.add_subparsers(dest="command", required=True)

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument("lat", type=float)
        p.add_argument("lon", type=float)
        p.add_argument("--tz", default=None, help="IANA timezone (inferred when omitted)")
        p.add_argument("--element", default="fire", choices=["fire", "water", "air", "earth"])
        p.add_argument("--lang", default="en")

    hours = sub.add_parser("hours", help="All 24 hours for a date")
    hours.add_argument("date", type=lambda s: date.fromisoformat(s).isoformat())
    _common(hours)
    hours.set_defaults(func=cmd_hours)

    now = sub.add_parser("now", help="Current hour, alignment and window")
    _common(now)
    now.add_argument("--purpose", default=None)
    now.set_defaults(func=cmd_now)

    watch = sub.add_parser("watch", help="Poll the current hour")
    _common(watch)
    watch.add_argument("--interval", type=float, default=60.0)
    watch.add_argument("--count", type=int, default=None)
    watch.set_defaults(func=cmd_watch)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    init_paths()
    try:
        args.func(args)
    except InvalidLocationError as exc:
        print(f"Invalid location: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
