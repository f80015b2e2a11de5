#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys

from telugu_chat.client import ConversationClient, ConversationState
from telugu_chat.core.models.message import Role

PROMPT = "మీరు> "
EXIT_WORDS = {"/exit", "/quit"}


def _label(role: Role) -> str:
    return "AI" if role is Role.ASSISTANT else "మీ"


class TranscriptPrinter:
    """Prints transcript messages as they appear in the conversation state."""

    def __init__(self, out=None) -> None:
        self._out = out if out is not None else sys.stdout
        self._shown = 0
        self._typing = False

    def __call__(self, state: ConversationState) -> None:
        messages = state.messages
        for message in messages[self._shown:]:
            if message.role is Role.ASSISTANT:
                print(f"{_label(message.role)}: {message.content}", file=self._out)
        self._shown = len(messages)

        if state.is_sending and not self._typing:
            print("AI: …", file=self._out)
        self._typing = state.is_sending
        self._out.flush()


async def talk(base_url: str) -> int:
    async with ConversationClient(base_url) as client:
        printer = TranscriptPrinter()
        client.state.subscribe(printer)
        printer(client.state)

        while True:
            try:
                line = await asyncio.to_thread(input, PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                return 0
            if line.strip() in EXIT_WORDS:
                return 0
            await client.submit(line)


def serve(host: str, port: int, reload: bool) -> int:
    import uvicorn

    uvicorn.run("telugu_chat.main:app", host=host, port=port, reload=reload)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="telugu-chat",
        description="Telugu AI chat: relay server and terminal client"
    )
    sub = parser.add_subparsers(dest="command")

    p_serve = sub.add_parser("serve", help="run the chat relay API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true", help="reload on code changes")

    p_talk = sub.add_parser("talk", help="chat with a running relay from the terminal")
    p_talk.add_argument("--base-url", default="http://127.0.0.1:8000",
                        help="relay base URL (without /api/chat)")

    args = parser.parse_args(argv)

    if args.command == "serve":
        return serve(args.host, args.port, args.reload)
    if args.command == "talk":
        return asyncio.run(talk(args.base_url))

    parser.print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main())
