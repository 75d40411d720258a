"""Document command orchestration for the CLI.

This module provides the DocumentCommands class that runs each CLI verb as
the same pipeline:

    1. Load config             (Stage.LOAD_CONFIG)
    2. Build a client          (via the injected ClientFactory, cannot fail)
    3. Run the operation       (fetch / read+update / list / create / ...)
    4. Close the client        (when it has a close() method)
    5. Apply the local effect  (write {id}.md, print results)

The first failing stage aborts the command with a CommandError tagged with
that stage; nothing is retried. Document IDs are used verbatim as filename
stems (``{id}.md`` in the working directory) with no sanitization, so
callers are responsible for passing IDs that are safe path components.
"""

import logging
import os
import stat
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from src.cli.config import ConfigLoader
from src.cli.errors import CLIError, CommandError, LocalIOError
from src.cli.models import Stage
from src.cli.output import OutputHandler
from src.outline_client.auth import OutlineConfig, mask_api_key
from src.outline_client.errors import SyncError
from src.outline_client.interface import (
    ClientFactory,
    DocumentClient,
    default_client_factory,
)
from src.outline_client.models import Document

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".md"


class DocumentCommands:
    """Runs pull, push, list, create and the maintenance verbs.

    All collaborators are injected, so tests can drive every command against a
    stub client without touching the network or patching module globals:

        >>> commands = DocumentCommands(
        ...     client_factory=lambda config: stub_client,
        ...     config_loader=lambda: OutlineConfig("key", "https://docs.example.com"),
        ... )
        >>> commands.pull("doc123")

    Each instance keeps its own factory; substituting one for a test never
    affects another instance.
    """

    def __init__(
        self,
        client_factory: ClientFactory = default_client_factory,
        config_loader: Optional[Callable[[], OutlineConfig]] = None,
        output_handler: Optional[OutputHandler] = None,
        workdir: Optional[str] = None,
        verbose: bool = False,
    ):
        """Initialize the dispatcher.

        Args:
            client_factory: Builds a client from the loaded config
            config_loader: Returns the config (defaults to ConfigLoader.load)
            output_handler: OutputHandler for terminal output (optional)
            workdir: Directory holding ``{id}.md`` files (defaults to the cwd at call time)
            verbose: Echo HTTP exchanges to the diagnostic console
        """
        self.client_factory = client_factory
        self.config_loader = config_loader or ConfigLoader.load
        self.output_handler = output_handler or OutputHandler()
        self.workdir = workdir
        self.verbose = verbose

    def document_path(self, doc_id: str) -> Path:
        """Local file for a document: ``{doc_id}.md`` in the working directory."""
        base = Path(self.workdir) if self.workdir is not None else Path.cwd()
        return base / f"{doc_id}{DOCUMENT_SUFFIX}"

    def pull(self, doc_id: str) -> Path:
        """Fetch a document and write its text to ``{doc_id}.md``.

        The file is replaced atomically: on any failure the previous file (or
        no file) is left in place. An existing file keeps its permissions; a
        new one gets the default mode for the current umask.

        Returns:
            Path of the written file

        Raises:
            CommandError: tagged LOAD_CONFIG or FETCH_DOCUMENT
            LocalIOError: tagged WRITE_FILE
        """
        with self._open_client() as client:
            with self._stage(Stage.FETCH_DOCUMENT), self._spinner(f"Fetching {doc_id}..."):
                document = client.get_document(doc_id, verbose=self.verbose)

        path = self.document_path(doc_id)
        try:
            _write_atomic(path, document.text)
        except OSError as e:
            raise LocalIOError(Stage.WRITE_FILE, str(path), e) from e

        logger.info(f"Pulled {doc_id} (version {document.version}) to {path}")
        self.output_handler.success(f"Successfully pulled document to {path.name}")
        return path

    def push(self, doc_id: str) -> None:
        """Replace a document's text with the content of ``{doc_id}.md``.

        The local file is read before any request is made, so a missing file
        never reaches the service.

        Raises:
            CommandError: tagged LOAD_CONFIG or UPDATE_DOCUMENT
            LocalIOError: tagged READ_FILE
        """
        with self._open_client() as client:
            content = _read_text(self.document_path(doc_id))

            with self._stage(Stage.UPDATE_DOCUMENT), self._spinner(f"Pushing {doc_id}..."):
                client.update_document(doc_id, content, verbose=self.verbose)

        logger.info(f"Pushed {len(content)} characters to {doc_id}")
        self.output_handler.success(f"Successfully pushed changes to document {doc_id}")

    def list_documents(self) -> List[Document]:
        """Print ``{id}: {title}`` for each document, in service order.

        Raises:
            CommandError: tagged LOAD_CONFIG or LIST_DOCUMENTS
        """
        with self._open_client() as client:
            with self._stage(Stage.LIST_DOCUMENTS), self._spinner("Listing documents..."):
                documents = client.list_documents(verbose=self.verbose)

        for document in documents:
            self.output_handler.print(f"{document.id}: {document.title}")
        return documents

    def create(
        self,
        title: str,
        text: Optional[str] = None,
        collection_id: Optional[str] = None,
        text_path: Optional[str] = None,
    ) -> Document:
        """Create a document and print its new ID.

        Args:
            title: Title of the new document
            text: Markdown body (defaults to a heading with the title)
            collection_id: Target collection (defaults to the configured one)
            text_path: Markdown file to read the body from (overrides text)

        Raises:
            CommandError: tagged LOAD_CONFIG or CREATE_DOCUMENT
            LocalIOError: tagged READ_FILE
        """
        config = self._load_config()

        collection_id = collection_id or config.collection_id
        if not collection_id:
            raise CommandError(
                Stage.CREATE_DOCUMENT,
                ValueError(
                    "no collection id given; pass --collection or set collection_id in the config"
                ),
            )
        if text_path is not None:
            text = _read_text(Path(text_path))
        elif text is None:
            text = f"# {title}\n\nNew document created via CLI."

        with self._open_client(config) as client:
            with self._stage(Stage.CREATE_DOCUMENT), self._spinner(f"Creating '{title}'..."):
                document = client.create_document(
                    title, text, collection_id, verbose=self.verbose
                )

        self.output_handler.success(
            f"Successfully created document with ID: {document.id}"
        )
        return document

    def check_connection(self) -> None:
        """Verify that the configured API key is accepted by the service.

        Raises:
            CommandError: tagged LOAD_CONFIG or CHECK_CONNECTION
        """
        with self._open_client() as client:
            with self._stage(Stage.CHECK_CONNECTION), self._spinner("Contacting Outline..."):
                client.auth_info(verbose=self.verbose)
        self.output_handler.success("API connection successful!")

    def publish(self, doc_id: str) -> None:
        """Publish a draft document.

        Raises:
            CommandError: tagged LOAD_CONFIG or PUBLISH_DOCUMENT
        """
        with self._open_client() as client:
            with self._stage(Stage.PUBLISH_DOCUMENT), self._spinner(f"Publishing {doc_id}..."):
                client.publish_document(doc_id, verbose=self.verbose)
        self.output_handler.success(f"Successfully updated document {doc_id}")

    def show_config(self) -> OutlineConfig:
        """Print the active configuration with the API key masked."""
        config = self._load_config()
        self.output_handler.print("Configuration:")
        self.output_handler.print(f"  Outline URL: {config.base_url}")
        self.output_handler.print(f"  API Key: {mask_api_key(config.api_key)}")
        if config.collection_id:
            self.output_handler.print(f"  Collection: {config.collection_id}")
        return config

    def _load_config(self) -> OutlineConfig:
        try:
            return self.config_loader()
        except (SyncError, OSError, ValueError) as e:
            raise CommandError(Stage.LOAD_CONFIG, e) from e

    @contextmanager
    def _open_client(self, config: Optional[OutlineConfig] = None) -> Iterator[DocumentClient]:
        """Build a client for one command and close it afterwards, if it can be closed."""
        client = self.client_factory(config or self._load_config())
        try:
            yield client
        finally:
            close = getattr(client, "close", None)
            if callable(close):
                close()

    @contextmanager
    def _stage(self, stage: Stage) -> Iterator[None]:
        """Wrap any failure raised inside the block as CommandError(stage).

        Every exception a client raises is tagged, not only OutlineError.
        CLIErrors already carry a stage and pass through unchanged.
        """
        try:
            yield
        except CLIError:
            raise
        except Exception as e:
            logger.debug(f"{stage} failed: {type(e).__name__}")
            raise CommandError(stage, e) from e

    @contextmanager
    def _spinner(self, message: str) -> Iterator[None]:
        # Verbose echo goes to stderr; a live spinner would interleave with it
        if self.verbose:
            yield
            return
        with self.output_handler.spinner(message):
            yield


def _default_file_mode() -> int:
    """Mode a newly created file would get under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_atomic(path: Path, text: str) -> None:
    """Write text to path via a temp file in the same directory and os.replace.

    mkstemp creates the temp file 0600, so the final mode is set explicitly:
    the existing file's mode if there is one, the umask default otherwise.
    """
    try:
        mode = stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        mode = _default_file_mode()

    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(text)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


def _read_text(path: Path) -> str:
    """Read a local Markdown file verbatim (no newline translation)."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LocalIOError(Stage.READ_FILE, str(path), e) from e
