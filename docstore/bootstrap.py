"""Bootstrap helpers for assembling a document store from settings."""

from __future__ import annotations

from typing import Any

from firebase_admin import credentials
from google.auth.exceptions import GoogleAuthError

from docstore.adapters.firestore import FirestoreDocumentStore
from docstore.core.config import Settings, settings as default_settings
from docstore.core.exceptions import StoreInitializationError
from docstore.core.logging import get_logger

logger = get_logger(__name__)


def load_credential(settings: Settings) -> Any:
    """Return the Firebase credential described by ``settings``.

    A configured service-account file wins; otherwise Application Default
    Credentials are used.
    """
    path = settings.FIREBASE_CREDENTIALS_PATH
    try:
        if path is not None:
            logger.info("loading service account credential from %s", path)
            return credentials.Certificate(str(path))
        return credentials.ApplicationDefault()
    except (OSError, ValueError, GoogleAuthError) as exc:
        raise StoreInitializationError("error loading firebase credential") from exc


def build_document_store(settings: Settings | None = None) -> FirestoreDocumentStore:
    """Return a document store wired to the configured Firebase project."""

    resolved = settings or default_settings
    return FirestoreDocumentStore.new(
        load_credential(resolved),
        project_id=resolved.FIREBASE_PROJECT_ID,
        app_name=resolved.FIREBASE_APP_NAME,
    )


__all__ = ["build_document_store", "load_credential"]
