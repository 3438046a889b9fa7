from __future__ import annotations

import argparse
import json
import os
import sys
import urllib.error
import urllib.request
from typing import Any

DEFAULT_BASE_URL = os.getenv("POINTWALLET_BASE_URL", "http://127.0.0.1:8080")


def _join_url(base_url: str, path: str) -> str:
    base = base_url.rstrip("/")
    if path.startswith("http://") or path.startswith("https://"):
        return path
    if not path.startswith("/"):
        path = "/" + path
    return base + path


def _error_detail(raw: bytes, fallback: str) -> str:
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return fallback
    if isinstance(payload, dict) and "message" in payload:
        return f"{payload.get('code', '')} {payload['message']}".strip()
    return str(payload)


def _request(base_url: str, method: str, path: str, timeout: float, payload: Any = None) -> Any:
    url = _join_url(base_url, path)
    headers = {"Accept": "application/json"}
    body: bytes | None = None
    if payload is not None:
        headers["Content-Type"] = "application/json"
        body = json.dumps(payload, ensure_ascii=True).encode("utf-8")
    req = urllib.request.Request(url=url, method=method, headers=headers, data=body)
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            raw = resp.read()
            if not raw:
                return {"ok": True}
            return json.loads(raw.decode("utf-8"))
    except urllib.error.HTTPError as exc:
        detail = _error_detail(exc.read(), str(exc.reason))
        raise RuntimeError(f"HTTP {exc.code}: {detail}") from exc
    except urllib.error.URLError as exc:
        raise RuntimeError(f"request failed: {exc.reason}") from exc


def _print(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _cmd_health(args: argparse.Namespace) -> None:
    _print(_request(args.base_url, "GET", "/healthz", args.timeout))


def _cmd_balance(args: argparse.Namespace) -> None:
    _print(_request(args.base_url, "GET", f"/point/{args.user_id}", args.timeout))


def _cmd_history(args: argparse.Namespace) -> None:
    _print(_request(args.base_url, "GET", f"/point/{args.user_id}/histories", args.timeout))


def _cmd_charge(args: argparse.Namespace) -> None:
    _print(_request(args.base_url, "PATCH", f"/point/{args.user_id}/charge", args.timeout, payload=args.amount))


def _cmd_use(args: argparse.Namespace) -> None:
    _print(_request(args.base_url, "PATCH", f"/point/{args.user_id}/use", args.timeout, payload=args.amount))


def _cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    from pointwallet.app.main import create_app
    from pointwallet.app.settings import load_settings

    settings = load_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    if args.reload:
        uvicorn.run("pointwallet.app.main:create_app", factory=True, host=host, port=port, reload=True)
        return
    uvicorn.run(create_app(settings), host=host, port=port)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pointwallet", description="Point wallet client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    parser.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Start the point wallet API service")
    p_serve.add_argument("--host", default=None, help="Bind host, default from settings/env")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port, default from settings/env")
    p_serve.add_argument("--reload", action="store_true", help="Enable auto-reload")
    p_serve.set_defaults(func=_cmd_serve)

    p_health = sub.add_parser("health", help="Check service health")
    p_health.set_defaults(func=_cmd_health)

    p_balance = sub.add_parser("balance", help="Query user point balance")
    p_balance.add_argument("user_id")
    p_balance.set_defaults(func=_cmd_balance)

    p_history = sub.add_parser("history", help="List user point transactions")
    p_history.add_argument("user_id")
    p_history.set_defaults(func=_cmd_history)

    p_charge = sub.add_parser("charge", help="Charge points to a user")
    p_charge.add_argument("user_id")
    p_charge.add_argument("amount", type=int)
    p_charge.set_defaults(func=_cmd_charge)

    p_use = sub.add_parser("use", help="Use points from a user")
    p_use.add_argument("user_id")
    p_use.add_argument("amount", type=int)
    p_use.set_defaults(func=_cmd_use)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
