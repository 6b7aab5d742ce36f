"""CLI entry point for the conference reply drafter."""

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config import AddinSettings, ConfigError, load_runtime_config
from src.logging_config import configure_logging
from src.mailbox import GmailMailboxHost, MailboxError
from src.taskpane import ActionResult, TaskpaneController


def _print_result(result: ActionResult) -> None:
    state = "SKIPPED" if result.skipped else ("OK" if result.success else "FAILED")
    print(f"  {result.action}: {state} ({result.duration_seconds}s)")
    for key, value in result.details.items():
        print(f"    {key}: {value}")
    print(f"    status: {result.status}")


async def run(args: argparse.Namespace, settings: AddinSettings) -> int:
    host = GmailMailboxHost()
    if not await host.select(args.message_id):
        print(f"Message {args.message_id} not found", file=sys.stderr)

    controller = TaskpaneController(host, settings)
    if args.draft_file:
        controller.response = args.draft_file.read_text()

    results = []
    if args.action == "save":
        results.append(await controller.save_email_as_json())
    if args.action in ("generate", "draft"):
        results.append(await controller.generate_response())
    if args.action == "reply" or (args.action == "draft" and controller.reply_available):
        results.append(await controller.reply_with_response())

    print("\n--- Actions ---")
    for result in results:
        _print_result(result)

    if controller.response and args.action in ("generate", "draft"):
        print("\n--- Draft ---")
        print(controller.response)

    return 0 if all(r.success for r in results) else 1


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Export a Gmail message or draft a conference follow-up reply"
    )
    parser.add_argument(
        "action",
        choices=["save", "generate", "reply", "draft"],
        help="save: export as JSON; generate: draft a response; "
        "reply: open a reply-all draft; draft: generate then reply",
    )
    parser.add_argument("--message-id", required=True, help="Gmail message ID")
    parser.add_argument(
        "--draft-file",
        type=Path,
        help="Use this file's text as the generated response (for reply)",
    )
    parser.add_argument(
        "--runtime-config",
        type=Path,
        help="JSON file of settings that take precedence over the environment",
    )
    parser.add_argument("--export-dir", type=Path, help="Directory for JSON exports")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    args = parser.parse_args()
    configure_logging(level_override=args.log_level)

    try:
        runtime = load_runtime_config(args.runtime_config) if args.runtime_config else {}
        if args.export_dir:
            runtime["EXPORT_DIR"] = str(args.export_dir)
        settings = AddinSettings.load(runtime)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        return asyncio.run(run(args, settings))
    except (MailboxError, FileNotFoundError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
