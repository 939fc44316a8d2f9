"""Terminal front-end for the credentials assistant.

Two commands are provided:

``chat``
    Interactive REPL. A short random "typing" pause is shown before each
    answer; it is purely cosmetic and the answer itself is computed
    synchronously once the pause ends.

``ask``
    Answer a single question and exit.
"""

from __future__ import annotations

import random
import time
from typing import Optional

import typer
from colorama import Fore, Style, init

from . import config
from .assistant import ConversationSession, explain, get_engine, new_session
from .monitoring import ActivityLog, ActivityRecord, get_activity_log

ASSISTANT_NAME = "Credentials Assistant"

WELCOME_BANNER = f"""
Hi! I'm the {ASSISTANT_NAME} for the Academic Credentials Platform.

I can answer questions about:
  • Signing up and institution authorization
  • Issuing, revoking and sharing credentials
  • Soulbound tokens (SBTs) and verification
  • Wallets, IPFS, security and pricing plans

Try:
  - "how do I issue a credential"
  - "can a student transfer a credential"
  - "how long do share links stay active"
  - "what are the pricing plans"

Type /reset to start over, /quit to leave.
""".strip()

RESET_COMMANDS = {"/reset", "/clear"}
QUIT_COMMANDS = {"/quit", "/exit", "exit", "quit"}

# Initialise colour handling for cross-platform compatibility
init(autoreset=True)

app = typer.Typer(help="Ask the academic credentials assistant")


def _typing_pause() -> None:
    low, high = config.TYPING_DELAY_MIN, config.TYPING_DELAY_MAX
    if high <= 0:
        return
    time.sleep(random.uniform(max(low, 0.0), max(high, low)))


def exchange(
    session: ConversationSession,
    text: str,
    activity: ActivityLog,
    debug: bool = False,
) -> Optional[str]:
    """Run one submit/resolve cycle and return the reply text."""

    if session.submit(text) is None:
        return None
    print(f"{Fore.YELLOW}…typing{Style.RESET_ALL}")
    interrupted = False
    try:
        _typing_pause()
    except KeyboardInterrupt:
        # A submitted message is always answered.
        interrupted = True
    msg = session.resolve()
    reply = session.last_reply
    if debug and reply is not None:
        print(f"[debug] source={reply.source.value} {explain(reply)}")
    activity.append(
        ActivityRecord(
            action="chat.message",
            actor="user",
            metadata={
                "source": reply.source.value if reply else None,
                "question": reply.question if reply else None,
            },
        )
    )
    if interrupted:
        raise KeyboardInterrupt
    return msg.content if msg else None


def repl(debug: Optional[bool] = None) -> None:
    debug = bool(debug) or config.CHATBOT_DEBUG
    session = new_session()
    activity = get_activity_log()
    print(WELCOME_BANNER)
    while True:
        try:
            user = input(f"{Fore.CYAN}you>{Style.RESET_ALL} ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break
        if not user:
            continue
        if user.lower() in QUIT_COMMANDS:
            print("Bye!")
            break
        if user.lower() in RESET_COMMANDS:
            session.reset()
            activity.append(ActivityRecord(action="chat.reset", actor="user"))
            print(session.messages[0].content)
            continue
        try:
            reply = exchange(session, user, activity, debug=debug)
        except KeyboardInterrupt:
            print(f"{Fore.GREEN}assistant>{Style.RESET_ALL} {session.messages[-1].content}")
            print("\nBye!")
            break
        if reply is not None:
            print(f"{Fore.GREEN}assistant>{Style.RESET_ALL} {reply}")


@app.command("chat")
def chat(
    debug: bool = typer.Option(False, "--debug", help="Show why each answer was chosen"),
) -> None:
    """Start an interactive chat session."""
    repl(debug=debug)


@app.command("ask")
def ask(text: str = typer.Argument(..., help="Question to ask")) -> None:
    """Answer a single question."""
    typer.echo(get_engine().respond(text))


def main() -> None:  # pragma: no cover - console entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
