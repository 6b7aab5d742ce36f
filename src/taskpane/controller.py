"""TaskpaneController - the add-in's three buttons wired to the pipeline."""

import logging
import time
from typing import Any, Awaitable, Callable, Optional

from src.completion import CompletionClient, CompletionError, HttpError
from src.config import AddinSettings
from src.drafting import PromptBuilder
from src.export import DirectorySaver, EmailExporter, ExportError
from src.formatter import ReplyFormatter
from src.mailbox import (
    EmailExtractor,
    MailboxError,
    MailboxHost,
    NoItemSelectedError,
    ReplyComposer,
)

from .exceptions import NoResponseError, TaskpaneError
from .models import ActionResult

logger = logging.getLogger(__name__)

SAVED_STATUS = "Email saved as JSON successfully!"
GENERATED_STATUS = "Email response generated!"
REPLY_STATUS = (
    "Reply All created with formatted response. "
    "The subject line is at the top of the email for easy copying."
)

ActionFn = Callable[[], Awaitable[tuple[str, dict[str, Any]]]]


def describe_error(error: Exception) -> str:
    """Reduce a pipeline failure to the status string shown to the user."""
    if isinstance(error, NoItemSelectedError):
        return "No email selected"
    if isinstance(error, HttpError):
        return f"Error generating legal response: {error.detail}"
    if isinstance(error, (MailboxError, CompletionError, ExportError, TaskpaneError)):
        return str(error)
    return f"Error: {error}"


class TaskpaneController:
    """Runs the save, generate and reply actions for the open message.

    Every failure is caught here and turned into a status string; nothing
    propagates to the caller. `status` and `response` hold the latest
    values (last write wins). An action that is already running is not
    started a second time.

    Example:
        controller = TaskpaneController(host, AddinSettings.load())
        await controller.generate_response()
        await controller.reply_with_response()
        print(controller.status)
    """

    def __init__(
        self,
        host: MailboxHost,
        settings: AddinSettings,
        extractor: Optional[EmailExtractor] = None,
        builder: Optional[PromptBuilder] = None,
        client: Optional[CompletionClient] = None,
        formatter: Optional[ReplyFormatter] = None,
        composer: Optional[ReplyComposer] = None,
        exporter: Optional[EmailExporter] = None,
    ):
        self._settings = settings
        self._extractor = extractor or EmailExtractor(host)
        self._builder = builder or PromptBuilder()
        self._client = client or CompletionClient(settings)
        self._formatter = formatter or ReplyFormatter()
        self._composer = composer or ReplyComposer(host)
        self._exporter = exporter or EmailExporter(DirectorySaver(settings.export_dir))
        self._in_flight: set[str] = set()

        self.status = ""
        self.response: Optional[str] = None

    @property
    def reply_available(self) -> bool:
        """Whether a generated draft is ready to be sent to reply-all."""
        return bool(self.response)

    async def _run_action(self, name: str, label: str, fn: ActionFn) -> ActionResult:
        """Run an action with timing, single-flight and error isolation."""
        if name in self._in_flight:
            logger.info("%s already in progress, ignoring", label, extra={"action": name})
            return ActionResult(
                action=name,
                success=False,
                status=f"{label} already in progress",
                skipped=True,
            )

        self._in_flight.add(name)
        start = time.monotonic()
        try:
            status, details = await fn()
            success, error = True, None
        except (MailboxError, CompletionError, ExportError, TaskpaneError) as e:
            logger.warning("Action '%s' failed: %s", name, e, extra={"action": name})
            status, details, success, error = describe_error(e), {}, False, str(e)
        except Exception as e:
            logger.exception("Action '%s' failed", name, extra={"action": name})
            status, details, success, error = describe_error(e), {}, False, str(e)
        finally:
            self._in_flight.discard(name)

        self.status = status
        return ActionResult(
            action=name,
            success=success,
            status=status,
            duration_seconds=round(time.monotonic() - start, 2),
            details=details,
            error=error,
        )

    async def save_email_as_json(self) -> ActionResult:
        """Export the open message to a JSON file."""

        async def save() -> tuple[str, dict[str, Any]]:
            self.status = "Processing..."
            record = await self._extractor.extract()
            path = self._exporter.export(record)
            return SAVED_STATUS, {"path": str(path)}

        return await self._run_action("save", "Save", save)

    async def generate_response(self) -> ActionResult:
        """Draft a follow-up for the open message with the chat model."""

        async def generate() -> tuple[str, dict[str, Any]]:
            self.status = "Preparing to send to Azure OpenAI..."
            self.response = None

            record = await self._extractor.extract()
            self.status = "Processing email content..."
            request = self._builder.build(record)

            self.status = "Generating AI response..."
            result = await self._client.generate(request)

            self.response = result.text
            return GENERATED_STATUS, {"characters": len(result.text)}

        return await self._run_action("generate", "Generate", generate)

    async def reply_with_response(self) -> ActionResult:
        """Open a reply-all draft with the generated response."""

        async def reply() -> tuple[str, dict[str, Any]]:
            self.status = "Creating reply all..."
            if not self.response:
                raise NoResponseError()

            formatted = self._formatter.format(self.response)
            subject = await self._composer.compose(formatted)
            return REPLY_STATUS, {"subject": subject}

        return await self._run_action("reply", "Reply", reply)
