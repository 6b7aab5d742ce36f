"""OAuth helper for the Gmail mailbox host."""

import logging
import os
from pathlib import Path
from typing import Optional

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import Resource, build

from .exceptions import NonInteractiveAuthError, ScopeMismatchError

logger = logging.getLogger(__name__)

# Read the open message and create reply drafts
DEFAULT_SCOPES = [
    "https://www.googleapis.com/auth/gmail.readonly",
    "https://www.googleapis.com/auth/gmail.compose",
]


def _path_setting(explicit: Optional[Path], env_var: str, default: Path) -> Path:
    if explicit:
        return explicit
    if os.environ.get(env_var):
        return Path(os.environ[env_var])
    return default


class GmailAuthenticator:
    """Builds an authorized Gmail API service, refreshing tokens as needed.

    Paths default to GMAIL_CREDENTIALS_PATH / GMAIL_TOKEN_PATH, falling back
    to config/credentials.json and config/token.json under the project root.
    """

    def __init__(
        self,
        credentials_path: Optional[Path] = None,
        token_path: Optional[Path] = None,
        scopes: Optional[list[str]] = None,
        interactive: bool = True,
    ):
        config_dir = Path(__file__).parent.parent.parent / "config"
        self._credentials_path = _path_setting(
            credentials_path, "GMAIL_CREDENTIALS_PATH", config_dir / "credentials.json"
        )
        self._token_path = _path_setting(
            token_path, "GMAIL_TOKEN_PATH", config_dir / "token.json"
        )
        self._scopes = scopes or DEFAULT_SCOPES
        self._interactive = interactive and not os.environ.get("GMAIL_NON_INTERACTIVE")
        self._service: Optional[Resource] = None

    def _has_required_scopes(self, creds: Credentials) -> bool:
        granted = creds.granted_scopes or creds.scopes or []
        return all(scope in granted for scope in self._scopes)

    def _load_token(self) -> Optional[Credentials]:
        if not self._token_path.exists():
            return None

        creds = Credentials.from_authorized_user_file(str(self._token_path), self._scopes)
        if self._has_required_scopes(creds):
            return creds

        if not self._interactive:
            raise ScopeMismatchError(
                required_scopes=self._scopes,
                token_scopes=list(creds.scopes or []),
            )
        logger.info("Stored Gmail token lacks required scopes, re-authenticating")
        self._token_path.unlink()
        return None

    def _run_login_flow(self) -> Credentials:
        if not self._credentials_path.exists():
            raise FileNotFoundError(
                f"Gmail OAuth credentials not found at {self._credentials_path}. "
                "Download them from the Google Cloud Console."
            )
        flow = InstalledAppFlow.from_client_secrets_file(
            str(self._credentials_path), self._scopes
        )
        return flow.run_local_server(port=0)

    def _get_credentials(self) -> Credentials:
        """Load, refresh or mint credentials, persisting any new token.

        Raises:
            FileNotFoundError: If a login is needed and credentials.json is missing.
            ScopeMismatchError: If the token lacks scopes in non-interactive mode.
            NonInteractiveAuthError: If a login is needed in non-interactive mode.
        """
        creds = self._load_token()
        if creds and creds.valid:
            return creds

        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        elif not self._interactive:
            raise NonInteractiveAuthError(
                "no stored token" if creds is None else "token expired without refresh token"
            )
        else:
            creds = self._run_login_flow()

        self._token_path.parent.mkdir(parents=True, exist_ok=True)
        self._token_path.write_text(creds.to_json())
        return creds

    def get_service(self) -> Resource:
        """Return the cached Gmail API service, building it on first use."""
        if self._service is None:
            self._service = build("gmail", "v1", credentials=self._get_credentials())
        return self._service
