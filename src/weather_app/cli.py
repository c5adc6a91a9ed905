import argparse
import asyncio
import sys
from typing import List, Optional

from weather_app.client.proxy import ProxyClient
from weather_app.core.log import configure_logging
from weather_app.core.settings import API_BASE_URL, HISTORY_FILE
from weather_app.history.storage import JsonFileStorage
from weather_app.history.store import SearchHistory
from weather_app.search.orchestrator import SearchOrchestrator, SearchState
from weather_app.search.view import ConsoleView


def build_orchestrator(api_base: str, history_file: str) -> SearchOrchestrator:
    history = SearchHistory(JsonFileStorage(history_file))
    orchestrator = SearchOrchestrator(ProxyClient(api_base), history, ConsoleView())
    orchestrator.start()
    return orchestrator


def run_search(orchestrator: SearchOrchestrator, city: str) -> int:
    state = asyncio.run(orchestrator.search(city))
    if orchestrator.view.alerts and state == SearchState.IDLE:
        return 2
    orchestrator.view.render()
    return 0 if state == SearchState.SUCCESS else 1


def run_history(orchestrator: SearchOrchestrator, action: str, index: Optional[int]) -> int:
    if action == "remove":
        if index is None:
            print("❌ remove 에는 --index 필요")
            return 2
        orchestrator.remove_history_entry(index)
    elif action == "clear":
        orchestrator.clear_history()
    elif action == "search":
        if index is None:
            print("❌ search 에는 --index 필요")
            return 2
        asyncio.run(orchestrator.search_history_entry(index))
        orchestrator.view.render()
        return 0 if orchestrator.state == SearchState.SUCCESS else 1
    orchestrator.view.render_history_block()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="weather-app", description="한글 도시명 날씨 + 옷차림 추천")
    parser.add_argument("--api-base", default=API_BASE_URL, help="프록시 서버 주소")
    parser.add_argument("--history-file", default=str(HISTORY_FILE))
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="도시 날씨 검색")
    p_search.add_argument("city")

    p_history = sub.add_parser("history", help="최근 검색 관리")
    p_history.add_argument("action", nargs="?", default="list", choices=["list", "remove", "clear", "search"])
    p_history.add_argument("--index", type=int)

    p_serve = sub.add_parser("serve", help="프록시 API 서버 실행")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("weather_app.server:app", host=args.host, port=args.port)
        return 0

    orchestrator = build_orchestrator(args.api_base, args.history_file)
    if args.command == "search":
        return run_search(orchestrator, args.city)
    return run_history(orchestrator, args.action, args.index)


if __name__ == "__main__":
    sys.exit(main())
